"""Dependency wiring for the TutorSearch application."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Literal

from application.use_cases.load_corpus import load_corpus
from domain.entities import DEFAULT_LIMIT
from domain.errors import RetrievalError
from domain.interfaces import CorpusIndex, FragmentSource, RelevanceScorer, Tokenizer
from infrastructure.scoring.bm25_scorer import Bm25Scorer
from infrastructure.scoring.lexical_scorer import LexicalOverlapScorer
from infrastructure.sources.json_fragment_source import JsonFragmentSource
from infrastructure.storage.in_memory_corpus_index import InMemoryCorpusIndex
from infrastructure.text.whitespace_tokenizer import WhitespaceTokenizer

logger = logging.getLogger(__name__)

ScorerName = Literal["lexical", "bm25"]


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    tokenizer: Tokenizer
    scorer: RelevanceScorer
    corpus_index: CorpusIndex
    fragment_source: FragmentSource
    default_limit: int = DEFAULT_LIMIT


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for selecting the scorer and the corpus to serve."""

    scorer: ScorerName = "lexical"
    corpus_path: str | None = None
    default_limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls) -> "ContainerConfig":
        limit = os.getenv("TUTORSEARCH_DEFAULT_LIMIT")
        return cls(
            scorer=os.getenv("TUTORSEARCH_SCORER", "lexical"),  # type: ignore[arg-type]
            corpus_path=os.getenv("TUTORSEARCH_CORPUS") or None,
            default_limit=int(limit) if limit else DEFAULT_LIMIT,
        )


_SCORER_FACTORIES: dict[ScorerName, Callable[[Tokenizer], RelevanceScorer]] = {
    "lexical": LexicalOverlapScorer,
    "bm25": Bm25Scorer,
}


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    if cfg.default_limit <= 0:
        raise ValueError(f"default_limit must be positive, got {cfg.default_limit}")
    tokenizer = WhitespaceTokenizer()
    try:
        scorer = _SCORER_FACTORIES[cfg.scorer](tokenizer)
    except KeyError as exc:
        raise ValueError(f"Unknown scorer '{cfg.scorer}'") from exc
    fragment_source = JsonFragmentSource()
    # An unloaded index answers every search with RetrievalUnavailable.
    corpus_index = InMemoryCorpusIndex(ready=not cfg.corpus_path)
    if cfg.corpus_path:
        try:
            load_corpus(cfg.corpus_path, source=fragment_source, corpus_index=corpus_index)
        except RetrievalError:
            logger.exception("Could not load corpus from %s", cfg.corpus_path)
    logger.info("Container ready: scorer=%s fragments=%d", cfg.scorer, corpus_index.size())

    return Container(
        tokenizer=tokenizer,
        scorer=scorer,
        corpus_index=corpus_index,
        fragment_source=fragment_source,
        default_limit=cfg.default_limit,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
