"""Errors raised by the retrieval core."""
from __future__ import annotations


class RetrievalError(Exception):
    """Base class for retrieval failures."""

    error_code = "retrieval_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgument(RetrievalError):
    """The caller broke the contract (bad limit, duplicate id, malformed record)."""

    error_code = "invalid_argument"


class RetrievalUnavailable(RetrievalError):
    """The corpus cannot be read, e.g. it was never loaded."""

    error_code = "retrieval_unavailable"


__all__ = ["RetrievalError", "InvalidArgument", "RetrievalUnavailable"]
