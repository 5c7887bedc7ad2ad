"""Scorer based on exact token overlap between a query and a fragment."""
from __future__ import annotations

from typing import Sequence

from domain.entities import ContentFragment
from domain.interfaces import RelevanceScorer, Tokenizer
from infrastructure.text.whitespace_tokenizer import WhitespaceTokenizer

TITLE_WEIGHT = 2
BODY_WEIGHT = 1


def lexical_overlap_score(
    query_tokens: Sequence[str],
    title_tokens: Sequence[str],
    body_tokens: Sequence[str],
) -> float:
    """Average per-token overlap points, clamped to 1.0.

    Each query token earns ``TITLE_WEIGHT`` when it appears in the title and
    ``BODY_WEIGHT`` when it appears in the body; both can apply.
    """
    if not query_tokens:
        return 0.0
    title = set(title_tokens)
    body = set(body_tokens)
    points = 0
    for token in query_tokens:
        if token in title:
            points += TITLE_WEIGHT
        if token in body:
            points += BODY_WEIGHT
    return min(points / len(query_tokens), 1.0)


class LexicalOverlapScorer(RelevanceScorer):
    """Title-weighted keyword overlap, the default relevance signal."""

    def __init__(self, tokenizer: Tokenizer | None = None) -> None:
        self._tokenizer = tokenizer or WhitespaceTokenizer()

    def score(self, query_tokens: Sequence[str], fragment: ContentFragment) -> float:
        return lexical_overlap_score(
            query_tokens,
            self._tokenizer.normalize(fragment.title),
            self._tokenizer.normalize(fragment.body),
        )


__all__ = ["LexicalOverlapScorer", "lexical_overlap_score", "TITLE_WEIGHT", "BODY_WEIGHT"]
