"""Use case for (re)loading the corpus from a serialized source."""
from __future__ import annotations

import logging
from pathlib import Path

from domain.entities import ContentFragment
from domain.interfaces import CorpusIndex, FragmentSource

logger = logging.getLogger(__name__)


def load_corpus(
    path: str | Path,
    *,
    source: FragmentSource,
    corpus_index: CorpusIndex,
) -> list[ContentFragment]:
    """Replace the indexed corpus with the fragments stored at ``path``.

    The new snapshot is parsed completely before the swap, so a broken file
    leaves the previous corpus in place.
    """

    fragments = source.load(path)
    corpus_index.replace(fragments)
    logger.info("Corpus reloaded from %s (%d fragments)", path, len(fragments))
    return fragments


def export_corpus(path: str | Path, *, source: FragmentSource, corpus_index: CorpusIndex) -> int:
    """Write the current snapshot to ``path`` and return the number of fragments."""

    fragments = corpus_index.all_fragments()
    source.export(fragments, path)
    return len(fragments)


__all__ = ["load_corpus", "export_corpus"]
