"""In-memory corpus index searched by linear scan."""
from __future__ import annotations

import logging
import threading
from typing import Iterable

from domain.entities import ContentFragment
from domain.errors import InvalidArgument, RetrievalUnavailable
from domain.interfaces import CorpusIndex

logger = logging.getLogger(__name__)


class InMemoryCorpusIndex(CorpusIndex):
    """Keeps fragments in an immutable tuple that writers replace wholesale.

    Readers grab the current tuple without locking, so a search always sees a
    single consistent snapshot even while the corpus is being reloaded.
    """

    def __init__(self, fragments: Iterable[ContentFragment] = (), *, ready: bool = True) -> None:
        self._write_lock = threading.Lock()
        self._fragments: tuple[ContentFragment, ...] = ()
        self._ready = ready
        initial = tuple(fragments)
        if initial:
            self.replace(initial)

    def all_fragments(self) -> tuple[ContentFragment, ...]:
        if not self._ready:
            raise RetrievalUnavailable("Corpus index has not been loaded yet.")
        return self._fragments

    def add_fragment(self, fragment: ContentFragment) -> None:
        with self._write_lock:
            if any(existing.id == fragment.id for existing in self._fragments):
                raise InvalidArgument(f"Fragment '{fragment.id}' is already indexed.")
            self._fragments = self._fragments + (fragment,)
            self._ready = True

    def replace(self, fragments: Iterable[ContentFragment]) -> None:
        snapshot = tuple(fragments)
        seen: set[str] = set()
        for fragment in snapshot:
            if fragment.id in seen:
                raise InvalidArgument(f"Duplicate fragment id '{fragment.id}' in corpus.")
            seen.add(fragment.id)
        with self._write_lock:
            self._fragments = snapshot
            self._ready = True
        logger.info("Corpus index now holds %d fragments", len(snapshot))

    def get(self, fragment_id: str) -> ContentFragment | None:
        for fragment in self.all_fragments():
            if fragment.id == fragment_id:
                return fragment
        return None

    def size(self) -> int:
        return len(self._fragments)


__all__ = ["InMemoryCorpusIndex"]
