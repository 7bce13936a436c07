"""Statfeed exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class StatfeedError(Exception):
    """Base exception for all Statfeed failures."""


class StatfeedConfigError(StatfeedError):
    """Raised for invalid runtime configuration."""


class StatfeedIngestError(StatfeedError):
    """Raised for source fetch and parsing failures."""


class FetchFailedError(StatfeedIngestError):
    """Raised when a source responds with a non-2xx status or is unreachable.

    Attributes:
        url: Requested URL.
        status_code: HTTP status, or None for transport failures.
    """

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedRecordError(StatfeedIngestError):
    """Raised when a record or document fails JSON parsing or shape checks.

    Attributes:
        line_index: Zero-based physical line index for line-delimited
            sources, None for whole documents.
    """

    def __init__(self, message: str, line_index: int | None = None) -> None:
        super().__init__(message)
        self.line_index = line_index


class StatfeedExportError(StatfeedError):
    """Raised for CSV export failures."""


class EmptyDatasetWarning(UserWarning):
    """Issued when a source parses to zero rows."""
