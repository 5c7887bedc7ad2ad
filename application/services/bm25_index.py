"""BM25 index cached per corpus snapshot and reused between queries.

BM25+ keeps every term weight positive, so a match counts even in a one- or
two-fragment corpus. ``delta=0`` leaves fragments without the term at zero.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from hashlib import sha256
from typing import Sequence

from rank_bm25 import BM25Plus

from domain.entities import ContentFragment
from domain.interfaces import Tokenizer

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Bm25Snapshot:
    index: BM25Plus | None
    fragment_ids: tuple[str, ...]
    fingerprint: str

    def raw_scores(self, query_tokens: Sequence[str]) -> list[float]:
        if self.index is None or not query_tokens:
            return [0.0] * len(self.fragment_ids)
        return [float(value) for value in self.index.get_scores(list(query_tokens))]


class Bm25Index:
    """Caches a BM25 index, rebuilding it only when the corpus changes."""

    def __init__(self, tokenizer: Tokenizer) -> None:
        self._tokenizer = tokenizer
        self._snapshot = Bm25Snapshot(index=None, fragment_ids=(), fingerprint="")

    def snapshot_for(self, fragments: Sequence[ContentFragment]) -> Bm25Snapshot:
        fingerprint = self._fingerprint(fragments)
        current = self._snapshot
        if fingerprint == current.fingerprint:
            return current
        corpus = [self._tokenize(fragment) for fragment in fragments]
        ids = tuple(fragment.id for fragment in fragments)
        if not fragments or not any(corpus):
            snapshot = Bm25Snapshot(index=None, fragment_ids=ids, fingerprint=fingerprint)
        else:
            logger.debug("Rebuilding BM25 index over %d fragments", len(fragments))
            snapshot = Bm25Snapshot(index=BM25Plus(corpus, delta=0), fragment_ids=ids, fingerprint=fingerprint)
        self._snapshot = snapshot
        return snapshot

    def _tokenize(self, fragment: ContentFragment) -> list[str]:
        return self._tokenizer.normalize(fragment.title) + self._tokenizer.normalize(fragment.body)

    @staticmethod
    def _fingerprint(fragments: Sequence[ContentFragment]) -> str:
        digest = sha256()
        for fragment in fragments:
            digest.update(f"{fragment.id}\x1f{fragment.title}\x1f{fragment.body}\x1e".encode("utf-8"))
        return f"{len(fragments)}:{digest.hexdigest()}"


__all__ = ["Bm25Index", "Bm25Snapshot"]
