"""Domain exception hierarchy.

All exceptions inherit from ``LintscopeError`` so callers can catch broadly
or narrowly as needed.  The analyzers themselves never raise for well-formed
input; these cover payload ingestion and orchestration.
"""

from __future__ import annotations


class LintscopeError(Exception):
    """Base exception for all Lintscope errors."""

    def __init__(self, message: str = "", *, detail: str = "") -> None:
        self.detail = detail or message
        super().__init__(message)


# ── Analysis ─────────────────────────────────────────────────────────────────


class AnalysisError(LintscopeError):
    """Error while orchestrating an analysis run."""


class AnalysisTimeoutError(AnalysisError):
    """The analysis exceeded the timeout imposed by the caller."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__("Analysis timed out", detail=f"Timeout after {timeout}s")


# ── Validation ───────────────────────────────────────────────────────────────


class ValidationError(LintscopeError):
    """Input validation failed."""


class InvalidPayloadError(ValidationError):
    """The pull request payload could not be parsed into domain models."""
