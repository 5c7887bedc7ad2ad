"""Domain entities for the TutorSearch system."""
from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_LIMIT = 5


@dataclass(slots=True, frozen=True)
class ContentFragment:
    """One indexed unit of training content (a chunk of a manual, a Q&A pair...)."""

    id: str
    title: str
    body: str
    source_ref: str | None = None
    category: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(slots=True)
class Query:
    """A user query issued to the retrieval engine."""

    text: str
    limit: int = DEFAULT_LIMIT


@dataclass(slots=True, frozen=True)
class ScoredResult:
    """A fragment paired with its relevance and 1-based rank."""

    fragment: ContentFragment
    relevance: float
    rank: int


__all__ = [
    "DEFAULT_LIMIT",
    "ContentFragment",
    "Query",
    "ScoredResult",
]
