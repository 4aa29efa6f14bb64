"""Domain models shared across all Lintscope modules.

These Pydantic models define the contract between the analyzers, the
orchestrator and the feedback generator.  Every module communicates through
these types, never raw dicts.  All models are frozen: once an analysis has
been built nothing downstream mutates it.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from lintscope.core.exceptions import InvalidPayloadError


# ── Enums ────────────────────────────────────────────────────────────────────


class FileStatus(StrEnum):
    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"


class Severity(StrEnum):
    CRITICAL = "Critical"
    WARNING = "Warning"
    SUGGESTION = "Suggestion"


class IssueCategory(StrEnum):
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    CODE_STYLE = "CodeStyle"
    MAINTAINABILITY = "Maintainability"
    ARCHITECTURE = "Architecture"


class Layer(StrEnum):
    DATA = "data"
    CONTROLLER = "controller"
    SERVICE = "service"
    VIEW = "view"
    UTILITY = "utility"
    UNKNOWN = "unknown"


def new_issue_id(prefix: str = "issue") -> str:
    """Generate a run-unique issue id such as ``security-hardcoded-3f2a...``."""
    return f"{prefix}-{uuid.uuid4().hex}"


# ── PR Input Models ─────────────────────────────────────────────────────────


class FileChange(BaseModel):
    """A single file affected by the PR, with its full text when available."""

    model_config = ConfigDict(frozen=True)

    filename: str
    status: FileStatus
    content: str | None = None
    patch: str | None = None

    @property
    def text(self) -> str:
        """File content, or an empty string when it could not be fetched."""
        return self.content or ""


class PullRequestPayload(BaseModel):
    """The unit of work handed to the analyzer by ingestion code."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    title: str
    description: str | None = None
    branch: str
    base: str
    repository: str
    author: str
    changes: list[FileChange] = Field(default_factory=list)


def parse_payload(data: dict[str, Any]) -> PullRequestPayload:
    """Validate a raw dict (e.g. a decoded JSON body) into a payload.

    Raises:
        InvalidPayloadError: if the data does not describe a valid payload.
    """
    try:
        return PullRequestPayload.model_validate(data)
    except pydantic.ValidationError as e:
        raise InvalidPayloadError(
            "Invalid pull request payload",
            detail=f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
        ) from e


# ── Analysis Models ─────────────────────────────────────────────────────────


class IssueLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    line: int | None = None
    column: int | None = None


class CodeIssue(BaseModel):
    """A single finding produced by an analyzer."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_issue_id)
    title: str
    description: str
    category: IssueCategory
    severity: Severity
    location: IssueLocation
    snippet: str | None = None
    remediation: str | None = None


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_issues: int = 0
    critical_count: int = 0
    warning_count: int = 0
    suggestion_count: int = 0
    issues_by_category: dict[IssueCategory, int] = Field(
        default_factory=lambda: {c: 0 for c in IssueCategory}
    )


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration: int = 0  # milliseconds


class AnalysisResult(BaseModel):
    """Everything the analyzers found in one pull request."""

    model_config = ConfigDict(frozen=True)

    pr_id: str | int
    issues: list[CodeIssue] = Field(default_factory=list)
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary)
    metadata: AnalysisMetadata = Field(default_factory=AnalysisMetadata)


# ── Feedback Models ─────────────────────────────────────────────────────────


class InlineComment(BaseModel):
    """A review comment anchored to a file line, derived from one CodeIssue."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    message: str  # Markdown
    severity: Severity
    category: IssueCategory
    suggestion_id: str


class IssueCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    critical: int = 0
    warning: int = 0
    suggestion: int = 0
    total: int = 0


class FileReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    issues: IssueCounts
    comments: list[InlineComment] = Field(default_factory=list)


class TopIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity
    category: IssueCategory
    title: str
    file: str
    line: int | None = None


class SummaryReport(BaseModel):
    """Scored, ranked overview of an analysis, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    pr_id: str | int
    title: str
    overall_score: int = Field(ge=0, le=100)
    issue_stats: IssueCounts
    top_issues: list[TopIssue] = Field(default_factory=list)
    file_reports: list[FileReport] = Field(default_factory=list)
    analysis_time: str
    duration: int = 0


class ReviewFeedback(BaseModel):
    """Complete feedback bundle for one pull request."""

    model_config = ConfigDict(frozen=True)

    inline_comments: list[InlineComment] = Field(default_factory=list)
    summary_report: SummaryReport
    markdown_summary: str
