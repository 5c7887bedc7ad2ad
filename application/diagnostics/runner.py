"""Runs the diagnostic queries and aggregates their outcomes."""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from application.diagnostics.models import DiagnosticsReport, DiagnosticsStats, QueryOutcome
from domain.entities import ScoredResult
from domain.errors import RetrievalError

logger = logging.getLogger(__name__)

SearchCallable = Callable[[str, int], list[ScoredResult]]

DEFAULT_TEST_QUERIES: tuple[str, ...] = (
    "toilet installation steps",
    "pipe fitting procedures",
    "safety warnings plumbing",
    "PEX pipe installation",
    "drain cleaning methods",
)
DEFAULT_DIAGNOSTIC_LIMIT = 3
DEFAULT_PREVIEW_SIZE = 2


def run_diagnostics(
    search_fn: SearchCallable,
    queries: Sequence[str] = DEFAULT_TEST_QUERIES,
    *,
    limit: int = DEFAULT_DIAGNOSTIC_LIMIT,
    preview_size: int = DEFAULT_PREVIEW_SIZE,
) -> DiagnosticsReport:
    """Run every test query, keeping going when one of them fails."""

    outcomes: list[QueryOutcome] = []
    for query_text in queries:
        try:
            results = search_fn(query_text, limit)
        except RetrievalError as exc:
            logger.warning("Diagnostic query %r failed: %s", query_text, exc.message)
            outcomes.append(QueryOutcome(query=query_text, error=exc.message))
            continue
        except Exception as exc:
            logger.exception("Diagnostic query %r crashed", query_text)
            outcomes.append(QueryOutcome(query=query_text, error=str(exc) or "Search failed"))
            continue
        outcomes.append(
            QueryOutcome(
                query=query_text,
                result_count=len(results),
                results=list(results[:preview_size]),
            )
        )

    stats = DiagnosticsStats(
        total_test_queries=len(queries),
        successful_queries=sum(1 for outcome in outcomes if outcome.succeeded),
        total_results=sum(outcome.result_count for outcome in outcomes),
    )
    logger.info(
        "Diagnostics finished: %d/%d queries succeeded, %d results",
        stats.successful_queries,
        stats.total_test_queries,
        stats.total_results,
    )
    return DiagnosticsReport(stats=stats, outcomes=outcomes)
