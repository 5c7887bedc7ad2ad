"""Battery of fixed plumbing queries used to check the retrieval core end to end."""
from application.diagnostics.models import DiagnosticsReport, DiagnosticsStats, QueryOutcome
from application.diagnostics.runner import (
    DEFAULT_DIAGNOSTIC_LIMIT,
    DEFAULT_PREVIEW_SIZE,
    DEFAULT_TEST_QUERIES,
    run_diagnostics,
)

__all__ = [
    "QueryOutcome",
    "DiagnosticsStats",
    "DiagnosticsReport",
    "DEFAULT_TEST_QUERIES",
    "DEFAULT_DIAGNOSTIC_LIMIT",
    "DEFAULT_PREVIEW_SIZE",
    "run_diagnostics",
]
