"""Abstract interfaces for the TutorSearch system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Sequence

from domain.entities import ContentFragment


class Tokenizer(ABC):
    """Turns raw text into comparable tokens."""

    @abstractmethod
    def normalize(self, text: str) -> list[str]:
        """Return the tokens of ``text``; never fails, may return an empty list."""


class RelevanceScorer(ABC):
    """Scores how well a fragment answers a tokenized query."""

    @abstractmethod
    def score(self, query_tokens: Sequence[str], fragment: ContentFragment) -> float:
        """Return a relevance in ``[0, 1]`` for a single fragment."""

    def score_all(self, query_tokens: Sequence[str], fragments: Sequence[ContentFragment]) -> list[float]:
        """Score a whole corpus snapshot, one value per fragment in the same order."""
        return [self.score(query_tokens, fragment) for fragment in fragments]


class CorpusIndex(ABC):
    """Read-mostly collection of fragments available to search."""

    @abstractmethod
    def all_fragments(self) -> tuple[ContentFragment, ...]:
        """Return the current snapshot in insertion order."""

    @abstractmethod
    def add_fragment(self, fragment: ContentFragment) -> None:
        """Append a fragment to the corpus."""

    @abstractmethod
    def replace(self, fragments: Iterable[ContentFragment]) -> None:
        """Swap the whole corpus for ``fragments`` in one step."""

    @abstractmethod
    def get(self, fragment_id: str) -> ContentFragment | None:
        """Retrieve a fragment by id."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of fragments in the current snapshot."""


class FragmentSource(ABC):
    """Reads and writes serialized corpora produced by the ingestion pipeline."""

    @abstractmethod
    def load(self, path: str | Path) -> list[ContentFragment]:
        """Return the fragments stored at ``path``."""

    @abstractmethod
    def export(self, fragments: Sequence[ContentFragment], path: str | Path) -> None:
        """Write ``fragments`` to ``path``."""


__all__ = [
    "Tokenizer",
    "RelevanceScorer",
    "CorpusIndex",
    "FragmentSource",
]
