"""Okapi BM25 scorer normalised into the [0, 1] relevance range."""
from __future__ import annotations

from typing import Sequence

from application.services.bm25_index import Bm25Index
from domain.entities import ContentFragment
from domain.interfaces import RelevanceScorer, Tokenizer
from infrastructure.text.whitespace_tokenizer import WhitespaceTokenizer


class Bm25Scorer(RelevanceScorer):
    """Rank fragments with BM25 and divide by the best score of the batch.

    BM25 weights depend on the whole corpus, so scores are only comparable
    within one ``score_all`` call. ``score`` ranks a lone fragment, so any
    match yields 1.0 and no match yields 0.0.
    """

    def __init__(self, tokenizer: Tokenizer | None = None) -> None:
        self._index = Bm25Index(tokenizer or WhitespaceTokenizer())

    def score(self, query_tokens: Sequence[str], fragment: ContentFragment) -> float:
        return self.score_all(query_tokens, [fragment])[0]

    def score_all(self, query_tokens: Sequence[str], fragments: Sequence[ContentFragment]) -> list[float]:
        snapshot = self._index.snapshot_for(fragments)
        raw = [max(value, 0.0) for value in snapshot.raw_scores(query_tokens)]
        best = max(raw, default=0.0)
        if best <= 0.0:
            return [0.0] * len(raw)
        return [min(value / best, 1.0) for value in raw]


__all__ = ["Bm25Scorer"]
