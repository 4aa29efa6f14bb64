"""Code style analyzer."""

from __future__ import annotations

import re

from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.scanner import locate_line
from lintscope.core.models import CodeIssue, FileChange, IssueCategory, Severity

# camelCase with a single hump, or names with capitals at both ends (`ButtonS...`)
MIXED_CASE_DECLARATION = re.compile(r"\b(let|const|var)\s+([a-z]+[A-Z][a-z]*|[A-Z][a-z]*[A-Z])")

CONSOLE_STATEMENT = re.compile(r"console\.(log|debug|info|warn|error)\(")

# Standalone integer literals >= 2
MAGIC_NUMBER = re.compile(r"(?<!\w)(?:[2-9]|[1-9]\d+)(?!\w)")


class CodeStyleAnalyzer(Analyzer):
    """Flags inconsistent naming, leftover console output and magic numbers."""

    name = "code_style_analyzer"
    category = IssueCategory.CODE_STYLE

    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        content = change.text
        filename = change.filename
        issues: list[CodeIssue] = []

        for match in MIXED_CASE_DECLARATION.finditer(content):
            issues.append(
                self._issue(
                    "inconsistent-naming",
                    title="Inconsistent Variable Naming",
                    description="Variable names should follow a consistent naming convention",
                    severity=Severity.SUGGESTION,
                    file=filename,
                    line=locate_line(content, match.group(0)),
                    snippet=match.group(0),
                    remediation=(
                        "Use camelCase for variables and functions, "
                        "PascalCase for classes and interfaces"
                    ),
                )
            )

        for match in CONSOLE_STATEMENT.finditer(content):
            issues.append(
                self._issue(
                    "console-statement",
                    title="Console Statement",
                    description="Console statements should not be committed to production code",
                    severity=Severity.SUGGESTION,
                    file=filename,
                    line=locate_line(content, match.group(0)),
                    snippet=match.group(0),
                    remediation="Remove console statements or use a proper logging library",
                )
            )

        for match in MAGIC_NUMBER.finditer(content):
            issues.append(
                self._issue(
                    "magic-number",
                    title="Magic Number",
                    description="Magic numbers make code harder to understand and maintain",
                    severity=Severity.SUGGESTION,
                    file=filename,
                    line=locate_line(content, match.group(0)),
                    snippet=match.group(0),
                    remediation="Replace magic numbers with named constants",
                )
            )

        return issues


def analyze_code_style_issues(changes: list[FileChange]) -> list[CodeIssue]:
    return CodeStyleAnalyzer().analyze(changes)
