"""
Custom exceptions for the relgraph.io module.

Purpose
- Provide IO-layer error types for the load path (validate URL -> fetch -> parse).
- Keep relgraph.core as the source of truth for graph/state errors (see relgraph.core.errors).

Mapping to load failures
- InvalidSourceError: URL missing or without the expected suffix; raised before any network IO.
- FetchError: the HTTP request failed (connection error, timeout, non-2xx status).
- CsvParseError: the CSV text could not be parsed into rows.
- IoConfigError: invalid or unsupported configuration.

Notes
- Every error carries ``user_message``, the short text the app shows; ``str(exc)`` keeps the
  technical detail for logs.
- Load-level errors never modify session state; the caller decides how to report them.
"""

from __future__ import annotations

from typing import Any, Mapping

__all__ = [
    "IoError",
    "IoConfigError",
    "InvalidSourceError",
    "FetchError",
    "CsvParseError",
]


class IoError(Exception):
    """
    Base class for IO-related errors in relgraph.io.

    Args:
        message: Technical message (logged).
        user_message: Short message for the UI; defaults to ``message``.
        context: Optional extra fields (url, status code, ...) for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = message if user_message is None else user_message
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class IoConfigError(IoError):
    """
    Raised when configuration is invalid or unsupported.

    Examples:
        - Unreadable TOML file passed explicitly
        - Empty palette
    """


class InvalidSourceError(IoError):
    """Raised when the source URL is empty or does not end with the expected suffix."""


class FetchError(IoError):
    """
    Raised when fetching the CSV text fails.

    Notes:
        Wraps requests.RequestException (connection errors, timeouts, HTTP error statuses).
    """


class CsvParseError(IoError):
    """
    Raised when the CSV text cannot be parsed into rows.

    Notes:
        Wraps polars parse errors. No partial rows are returned.
    """
