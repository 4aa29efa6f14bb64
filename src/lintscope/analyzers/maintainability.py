"""Maintainability analyzer."""

from __future__ import annotations

import re

from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.scanner import find_block_end, locate_line, max_brace_depth
from lintscope.core.constants import (
    LONG_BLOCK_MAX_STATEMENTS,
    LONG_BLOCK_MIN_CHARS,
    MAX_FUNCTION_LINES,
    MAX_NESTING_DEPTH,
)
from lintscope.core.models import CodeIssue, FileChange, IssueCategory, Severity

FUNCTION_DECLARATION = re.compile(r"function\s+\w+\s*\([^)]*\)")

# Greedy: spans from the first `{` to the last `}` that is far enough away
LONG_CODE_BLOCK = re.compile(r"\{[\s\S]{%d,}\}" % LONG_BLOCK_MIN_CHARS)

TECH_DEBT_MARKER = re.compile(r"//\s*(TODO|FIXME|HACK|XXX)")

FUNCTION_REMEDIATION = "Break down long functions into smaller, more focused functions"


class MaintainabilityAnalyzer(Analyzer):
    """Detects deep nesting, long functions and blocks, and tech-debt markers."""

    name = "maintainability_analyzer"
    category = IssueCategory.MAINTAINABILITY

    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        content = change.text
        return [
            *self._deep_nesting(change.filename, content),
            *self._long_functions(change.filename, content),
            *self._long_code_blocks(change.filename, content),
            *self._tech_debt_markers(change.filename, content),
        ]

    def _deep_nesting(self, filename: str, content: str) -> list[CodeIssue]:
        depth = max_brace_depth(content)
        if depth <= MAX_NESTING_DEPTH:
            return []
        return [
            self._issue(
                "nesting-depth",
                title="Deep Nesting",
                description=f"Code has a nesting depth of {depth}",
                severity=Severity.WARNING,
                file=filename,
                remediation="Refactor code to reduce nesting by extracting functions or using early returns",
            )
        ]

    def _long_functions(self, filename: str, content: str) -> list[CodeIssue]:
        issues: list[CodeIssue] = []
        for match in FUNCTION_DECLARATION.finditer(content):
            declaration = match.group(0)
            # Identical declarations resolve to the first one's body.
            start = content.find(declaration)
            end = find_block_end(content, start + len(declaration))
            if end is None:
                end = start + len(declaration)

            line_count = content[start:end].count("\n") + 1
            if line_count <= MAX_FUNCTION_LINES:
                continue
            issues.append(
                self._issue(
                    "long-function",
                    title="Long Function",
                    description=f"Function is {line_count} lines long",
                    severity=Severity.WARNING,
                    file=filename,
                    line=locate_line(content, declaration),
                    remediation=FUNCTION_REMEDIATION,
                )
            )
        return issues

    def _long_code_blocks(self, filename: str, content: str) -> list[CodeIssue]:
        issues: list[CodeIssue] = []
        for match in LONG_CODE_BLOCK.finditer(content):
            block = match.group(0)
            statements = block.count(";")
            if statements <= LONG_BLOCK_MAX_STATEMENTS:
                continue
            issues.append(
                self._issue(
                    "long-code-block",
                    title="Long Code Block",
                    description=f"Code block contains {statements} statements",
                    severity=Severity.WARNING,
                    file=filename,
                    line=locate_line(content, block[:30]),
                    remediation="Break down long code blocks into smaller, more focused functions",
                )
            )
        return issues

    def _tech_debt_markers(self, filename: str, content: str) -> list[CodeIssue]:
        return [
            self._issue(
                "tech-debt",
                title="Technical Debt Marker",
                description="Comment indicates technical debt",
                severity=Severity.SUGGESTION,
                file=filename,
                line=locate_line(content, match.group(0)),
                snippet=match.group(0),
                remediation="Address technical debt or create a ticket to track it",
            )
            for match in TECH_DEBT_MARKER.finditer(content)
        ]


def analyze_maintainability_issues(changes: list[FileChange]) -> list[CodeIssue]:
    return MaintainabilityAnalyzer().analyze(changes)
