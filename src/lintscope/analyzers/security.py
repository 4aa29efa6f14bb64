"""Security vulnerability analyzer."""

from __future__ import annotations

import re

from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.scanner import locate_line
from lintscope.core.models import CodeIssue, FileChange, IssueCategory, Severity

# (pattern, title): a keyword assigned with = or : to a quoted literal
SECRET_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"""['"]?password['"]?\s*[:=]\s*['"][^'"]+['"]""", re.IGNORECASE), "Hardcoded Password"),
    (re.compile(r"""['"]?api_?key['"]?\s*[:=]\s*['"][^'"]+['"]""", re.IGNORECASE), "Hardcoded API Key"),
    (re.compile(r"""['"]?secret['"]?\s*[:=]\s*['"][^'"]+['"]""", re.IGNORECASE), "Hardcoded Secret"),
    (re.compile(r"""['"]?token['"]?\s*[:=]\s*['"][^'"]+['"]""", re.IGNORECASE), "Hardcoded Token"),
]

# `sql`/`query` assigned a quoted string with ${...} or `+ var +`
SQL_INJECTION_PATTERN = re.compile(
    r"""\b(sql|query)\s*[=:]\s*['"`].*(\$\{.*\}|\s*\+\s*\w+\s*\+\s*).*['"`]""",
    re.IGNORECASE,
)

XSS_PATTERN = re.compile(
    r"""\b(innerHTML|outerHTML|document\.write|document\.body\.innerHTML)\s*[=:]\s*"""
    r"""(['"`].*(\$\{.*\}|\s*\+\s*\w+\s*\+\s*).*['"`]|['"`].*['"`]\s*\+\s*\w+)""",
    re.IGNORECASE,
)

SECRET_REMEDIATION = (
    "Use environment variables or a secure secrets manager instead of hardcoding secrets"
)


class SecurityAnalyzer(Analyzer):
    """Detects hardcoded secrets, SQL built from strings and HTML injection sinks."""

    name = "security_analyzer"
    category = IssueCategory.SECURITY

    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        content = change.text
        issues: list[CodeIssue] = []

        for pattern, title in SECRET_PATTERNS:
            for match in pattern.finditer(content):
                snippet = match.group(0)
                issues.append(
                    self._issue(
                        "hardcoded",
                        title=title,
                        description="Found potential hardcoded secret in the code",
                        severity=Severity.CRITICAL,
                        file=change.filename,
                        line=locate_line(content, snippet),
                        snippet=snippet,
                        remediation=SECRET_REMEDIATION,
                    )
                )

        if SQL_INJECTION_PATTERN.search(content):
            issues.append(
                self._issue(
                    "sql-injection",
                    title="Potential SQL Injection",
                    description=(
                        "String interpolation or concatenation in SQL queries "
                        "can lead to SQL injection attacks"
                    ),
                    severity=Severity.CRITICAL,
                    file=change.filename,
                    remediation=(
                        "Use parameterized queries or prepared statements "
                        "instead of string interpolation"
                    ),
                )
            )

        if XSS_PATTERN.search(content):
            issues.append(
                self._issue(
                    "xss",
                    title="Potential XSS Vulnerability",
                    description="Directly inserting user input into HTML can lead to XSS attacks",
                    severity=Severity.CRITICAL,
                    file=change.filename,
                    remediation=(
                        "Use textContent instead of innerHTML or sanitize input "
                        "with a library like DOMPurify"
                    ),
                )
            )

        return issues


def analyze_security_issues(changes: list[FileChange]) -> list[CodeIssue]:
    return SecurityAnalyzer().analyze(changes)
