"""Result aggregation: summarize, score, and rank issues."""

from __future__ import annotations

from lintscope.core.constants import (
    DEFAULT_TOP_ISSUES,
    MAX_SCORE,
    SEVERITY_ORDER,
    SEVERITY_WEIGHTS,
)
from lintscope.core.models import (
    AnalysisSummary,
    CodeIssue,
    IssueCategory,
    Severity,
    TopIssue,
)


def summarize_issues(issues: list[CodeIssue]) -> AnalysisSummary:
    """Count issues by severity and by category (every category present)."""
    by_severity = {s: sum(1 for i in issues if i.severity == s) for s in Severity}

    return AnalysisSummary(
        total_issues=len(issues),
        critical_count=by_severity[Severity.CRITICAL],
        warning_count=by_severity[Severity.WARNING],
        suggestion_count=by_severity[Severity.SUGGESTION],
        issues_by_category={c: sum(1 for i in issues if i.category == c) for c in IssueCategory},
    )


def compute_score(critical: int, warning: int, suggestion: int) -> int:
    """Map severity counts to a 0-100 quality score.

    Each critical costs 10 points, each warning 3 and each suggestion 1,
    starting from 100 and never going below 0.
    """
    penalty = (
        critical * SEVERITY_WEIGHTS[Severity.CRITICAL]
        + warning * SEVERITY_WEIGHTS[Severity.WARNING]
        + suggestion * SEVERITY_WEIGHTS[Severity.SUGGESTION]
    )
    return min(MAX_SCORE, max(0, round(MAX_SCORE - penalty)))


def score_summary(summary: AnalysisSummary) -> int:
    return compute_score(summary.critical_count, summary.warning_count, summary.suggestion_count)


def rank_issues(issues: list[CodeIssue], limit: int = DEFAULT_TOP_ISSUES) -> list[TopIssue]:
    """Most severe issues first (stable within a severity), truncated to ``limit``."""
    ranked = sorted(issues, key=lambda i: SEVERITY_ORDER.get(i.severity.value, 99))

    return [
        TopIssue(
            severity=issue.severity,
            category=issue.category,
            title=issue.title,
            file=issue.location.file,
            line=issue.location.line,
        )
        for issue in ranked[:limit]
    ]
