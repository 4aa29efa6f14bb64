"""Turns an AnalysisResult into inline comments and a scored summary report."""

from __future__ import annotations

from lintscope.core.constants import (
    CATEGORY_EXPLANATIONS,
    DEFAULT_CATEGORY_EXPLANATION,
    DEFAULT_REVIEW_TITLE,
    DEFAULT_TOP_ISSUES,
    SEVERITY_EMOJI,
)
from lintscope.core.logging import get_logger
from lintscope.core.models import (
    AnalysisResult,
    CodeIssue,
    FileReport,
    InlineComment,
    IssueCounts,
    ReviewFeedback,
    Severity,
    SummaryReport,
)
from lintscope.feedback.markdown import generate_markdown_summary
from lintscope.orchestrator.aggregator import rank_issues, score_summary

logger = get_logger(__name__)


def get_severity_emoji(severity: Severity | str) -> str:
    return SEVERITY_EMOJI.get(str(severity), "")


def get_category_explanation(category: str) -> str:
    """One sentence on why issues of this category matter."""
    return CATEGORY_EXPLANATIONS.get(str(category), DEFAULT_CATEGORY_EXPLANATION)


def format_inline_comment(issue: CodeIssue) -> str:
    """Format an issue as a Markdown inline comment body."""
    emoji = get_severity_emoji(issue.severity)
    explanation = get_category_explanation(issue.category)

    comment = f"{emoji} **{issue.severity.value}: {issue.title}**\n\n"
    comment += f"{issue.description}\n\n"

    if issue.snippet:
        comment += f"```\n{issue.snippet}\n```\n\n"

    comment += f"**Why it matters**: {explanation}\n"

    if issue.remediation:
        comment += f"\n**Recommendation**: {issue.remediation}"

    return comment


def generate_inline_comments(result: AnalysisResult) -> list[InlineComment]:
    """Build one inline comment per issue that has a line number.

    Issues without a line (file-level findings) cannot be anchored and are
    skipped; they still count towards the summary.
    """
    comments: list[InlineComment] = []
    skipped = 0

    for issue in result.issues:
        if issue.location.line is None:
            logger.debug("skipping_issue_without_line", title=issue.title, file=issue.location.file)
            skipped += 1
            continue

        comments.append(
            InlineComment(
                file=issue.location.file,
                line=issue.location.line,
                message=format_inline_comment(issue),
                severity=issue.severity,
                category=issue.category,
                suggestion_id=issue.id,
            )
        )

    logger.info(
        "inline_comments_generated",
        pr_id=result.pr_id,
        comments=len(comments),
        skipped=skipped,
    )
    return comments


def _count(comments: list[InlineComment]) -> IssueCounts:
    critical = sum(1 for c in comments if c.severity == Severity.CRITICAL)
    warning = sum(1 for c in comments if c.severity == Severity.WARNING)
    suggestion = sum(1 for c in comments if c.severity == Severity.SUGGESTION)
    return IssueCounts(
        critical=critical,
        warning=warning,
        suggestion=suggestion,
        total=critical + warning + suggestion,
    )


def generate_file_reports(result: AnalysisResult) -> list[FileReport]:
    """Group inline comments per file, worst files first.

    Files are ordered by critical count, then warning count, then total,
    all descending; ties keep first-seen order.
    """
    by_file: dict[str, list[InlineComment]] = {}
    for comment in generate_inline_comments(result):
        by_file.setdefault(comment.file, []).append(comment)

    reports = [
        FileReport(filename=filename, issues=_count(comments), comments=comments)
        for filename, comments in by_file.items()
    ]

    return sorted(
        reports,
        key=lambda r: (-r.issues.critical, -r.issues.warning, -r.issues.total),
    )


def generate_summary_report(
    result: AnalysisResult,
    title: str = DEFAULT_REVIEW_TITLE,
    top_n: int = DEFAULT_TOP_ISSUES,
) -> SummaryReport:
    summary = result.summary
    score = score_summary(summary)

    report = SummaryReport(
        pr_id=result.pr_id,
        title=title,
        overall_score=score,
        issue_stats=IssueCounts(
            critical=summary.critical_count,
            warning=summary.warning_count,
            suggestion=summary.suggestion_count,
            total=summary.total_issues,
        ),
        top_issues=rank_issues(result.issues, limit=top_n),
        file_reports=generate_file_reports(result),
        analysis_time=result.metadata.analyzed_at.isoformat(),
        duration=result.metadata.duration,
    )

    logger.info("summary_report_generated", pr_id=result.pr_id, score=score)
    return report


def generate_feedback(
    result: AnalysisResult,
    title: str = DEFAULT_REVIEW_TITLE,
    top_n: int = DEFAULT_TOP_ISSUES,
) -> ReviewFeedback:
    """Inline comments, summary report and its Markdown rendering in one bundle."""
    logger.info("generating_feedback", pr_id=result.pr_id)

    summary_report = generate_summary_report(result, title, top_n=top_n)
    return ReviewFeedback(
        inline_comments=generate_inline_comments(result),
        summary_report=summary_report,
        markdown_summary=generate_markdown_summary(summary_report),
    )
