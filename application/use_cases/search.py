"""Use case that ranks corpus fragments against a free-text query."""
from __future__ import annotations

import logging

from domain.entities import DEFAULT_LIMIT, Query, ScoredResult
from domain.errors import InvalidArgument
from domain.interfaces import CorpusIndex, RelevanceScorer, Tokenizer

logger = logging.getLogger(__name__)


def search(
    query_text: str,
    *,
    corpus_index: CorpusIndex,
    tokenizer: Tokenizer,
    scorer: RelevanceScorer,
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredResult]:
    """Return at most ``limit`` fragments ordered by descending relevance.

    Equal scores keep corpus order, so identical inputs always produce the
    same list. An empty (or whitespace-only) query yields no results.
    """

    query = Query(text=query_text, limit=_validate_limit(limit))
    query_tokens = tokenizer.normalize(query.text)
    if not query_tokens:
        return []

    fragments = corpus_index.all_fragments()
    scores = scorer.score_all(query_tokens, fragments)
    # sorted() is stable: ties stay in insertion order.
    ranked = sorted(zip(fragments, scores), key=lambda item: item[1], reverse=True)

    results = [
        ScoredResult(fragment=fragment, relevance=_clamp(score), rank=position)
        for position, (fragment, score) in enumerate(ranked[: query.limit], start=1)
    ]
    logger.debug("search %r limit=%d -> %d results", query.text, query.limit, len(results))
    return results


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgument(f"limit must be a positive integer, got {limit!r}")
    return limit


def _clamp(score: float) -> float:
    return min(max(float(score), 0.0), 1.0)


__all__ = ["search"]
