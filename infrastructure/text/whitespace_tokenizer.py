"""Tokenizer that lower-cases text and splits it on whitespace."""
from __future__ import annotations

from domain.interfaces import Tokenizer


class WhitespaceTokenizer(Tokenizer):
    """Lower-case and split on runs of whitespace.

    Punctuation is kept attached to words and nothing is stemmed, so
    ``"Pipe,"`` and ``"pipe"`` are different tokens.
    """

    def normalize(self, text: str) -> list[str]:
        if not text:
            return []
        return text.lower().split()


__all__ = ["WhitespaceTokenizer"]
