"""Abstract base class for all analyzers."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from lintscope.core.logging import get_logger
from lintscope.core.models import (
    CodeIssue,
    FileChange,
    IssueCategory,
    IssueLocation,
    Severity,
    new_issue_id,
)

logger = get_logger(__name__)


class Analyzer(ABC):
    """Abstract base for rule-based code analyzers.

    Each analyzer:
    1. Scans the text of every changed file with its own heuristics
    2. Emits ``CodeIssue`` objects tagged with its category

    Analyzers hold no state between calls, so one instance may be shared
    across threads and runs.
    """

    name: str = "base_analyzer"
    category: IssueCategory = IssueCategory.MAINTAINABILITY

    def analyze(self, changes: list[FileChange]) -> list[CodeIssue]:
        """Analyze every file change and return the findings in file order."""
        start_ms = time.perf_counter_ns() // 1_000_000

        issues: list[CodeIssue] = []
        for change in changes:
            issues.extend(self.analyze_file(change))

        logger.debug(
            "analyzer_complete",
            analyzer=self.name,
            files=len(changes),
            issues=len(issues),
            duration_ms=(time.perf_counter_ns() // 1_000_000) - start_ms,
        )
        return issues

    @abstractmethod
    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        """Return the findings for a single file.

        Args:
            change: The file to scan. Its ``text`` is empty when the content
                could not be fetched, which yields no findings.
        """
        ...

    def _issue(
        self,
        rule: str,
        *,
        title: str,
        description: str,
        severity: Severity,
        file: str,
        line: int | None = None,
        snippet: str | None = None,
        remediation: str | None = None,
    ) -> CodeIssue:
        """Build a CodeIssue in this analyzer's category with a fresh id."""
        return CodeIssue(
            id=new_issue_id(f"{self.category.value.lower()}-{rule}"),
            title=title,
            description=description,
            category=self.category,
            severity=severity,
            location=IssueLocation(file=file, line=line),
            snippet=snippet,
            remediation=remediation,
        )
