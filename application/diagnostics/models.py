"""Outcome and report types produced by the diagnostics runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from domain.entities import ScoredResult
from infrastructure.sources.json_fragment_source import scored_result_to_dict


@dataclass(slots=True)
class QueryOutcome:
    query: str
    result_count: int = 0
    results: list[ScoredResult] = field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"query": self.query, "error": self.error, "resultCount": 0}
        return {
            "query": self.query,
            "resultCount": self.result_count,
            "results": [scored_result_to_dict(result) for result in self.results],
        }


@dataclass(slots=True)
class DiagnosticsStats:
    total_test_queries: int
    successful_queries: int
    total_results: int

    def to_dict(self) -> dict[str, int]:
        return {
            "totalTestQueries": self.total_test_queries,
            "successfulQueries": self.successful_queries,
            "totalResults": self.total_results,
        }


@dataclass(slots=True)
class DiagnosticsReport:
    stats: DiagnosticsStats
    outcomes: list[QueryOutcome] = field(default_factory=list)
    message: str = "PDF system test completed"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "stats": self.stats.to_dict(),
            "testResults": [outcome.to_dict() for outcome in self.outcomes],
        }
