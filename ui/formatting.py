"""Small text helpers for rendering search results."""
from __future__ import annotations

PREVIEW_LENGTH = 200


def truncate_text(text: str, max_length: int = PREVIEW_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters, marking the cut with ``...``."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_relevance(relevance: float) -> str:
    return f"{relevance * 100:.0f}%"


__all__ = ["PREVIEW_LENGTH", "truncate_text", "format_relevance"]
