"""Markdown and HTML rendering of a SummaryReport.

Output is fully determined by the report: the same report always renders
to byte-identical text.
"""

from __future__ import annotations

import html

from lintscope.core.constants import MARKDOWN_FOOTER, SEVERITY_EMOJI
from lintscope.core.models import FileReport, InlineComment, SummaryReport

_CRITICAL = SEVERITY_EMOJI["Critical"]
_WARNING = SEVERITY_EMOJI["Warning"]
_SUGGESTION = SEVERITY_EMOJI["Suggestion"]


def _headline(comment: InlineComment) -> str:
    """First line of a comment message without its emoji and bold markers."""
    first = comment.message.split("\n")[0].replace("**", "")
    emoji = SEVERITY_EMOJI.get(comment.severity.value, "")
    if emoji and first.startswith(emoji):
        first = first[len(emoji):]
    return first.strip()


def _file_section(report: FileReport) -> str:
    md = f"### {report.filename}\n\n"
    md += f"- Total Issues: {report.issues.total}\n"
    md += f"  - {_CRITICAL} Critical: {report.issues.critical}\n"
    md += f"  - {_WARNING} Warning: {report.issues.warning}\n"
    md += f"  - {_SUGGESTION} Suggestion: {report.issues.suggestion}\n\n"

    if not report.comments:
        return md

    md += "#### Issues\n\n"

    by_line: dict[int, list[InlineComment]] = {}
    for comment in report.comments:
        by_line.setdefault(comment.line, []).append(comment)

    for line in sorted(by_line):
        md += f"**Line {line}**:\n\n"
        for comment in by_line[line]:
            emoji = SEVERITY_EMOJI.get(comment.severity.value, "")
            md += f"- {emoji} {_headline(comment)}\n"
        md += "\n"

    return md


def generate_markdown_summary(report: SummaryReport) -> str:
    md = f"# {report.title} for PR #{report.pr_id}\n\n"

    md += "## Summary\n\n"
    md += f"- **Overall Score**: {report.overall_score}/100\n"
    md += f"- **Total Issues**: {report.issue_stats.total}\n"
    md += f"  - {_CRITICAL} Critical: {report.issue_stats.critical}\n"
    md += f"  - {_WARNING} Warning: {report.issue_stats.warning}\n"
    md += f"  - {_SUGGESTION} Suggestion: {report.issue_stats.suggestion}\n"
    md += f"- **Analysis Time**: {report.analysis_time}\n"
    md += f"- **Duration**: {report.duration}ms\n\n"

    if report.top_issues:
        md += "## Top Issues\n\n"
        for issue in report.top_issues:
            emoji = SEVERITY_EMOJI.get(issue.severity.value, "")
            md += f"- {emoji} **{issue.severity.value}**: {issue.title} in `{issue.file}`"
            if issue.line is not None:
                md += f" at line {issue.line}"
            md += "\n"
        md += "\n"

    if report.file_reports:
        md += "## Files\n\n"
        for file_report in report.file_reports:
            md += _file_section(file_report)

    md += f"---\n{MARKDOWN_FOOTER}"
    return md


def generate_html_summary(report: SummaryReport) -> str:
    """Compact HTML fragment for dashboards: title, score and severity counts."""
    pr_id = html.escape(str(report.pr_id))
    stats = report.issue_stats
    return (
        f"<h1>Code Review Summary for PR #{pr_id}</h1>\n"
        f"<p>Score: {report.overall_score}/100</p>\n"
        f"<p>Total Issues: {stats.total}</p>\n"
        "<ul>\n"
        f"  <li>{_CRITICAL} Critical: {stats.critical}</li>\n"
        f"  <li>{_WARNING} Warning: {stats.warning}</li>\n"
        f"  <li>{_SUGGESTION} Suggestion: {stats.suggestion}</li>\n"
        "</ul>"
    )
