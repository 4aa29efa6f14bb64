"""Performance analyzer."""

from __future__ import annotations

import re

from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.scanner import iter_brace_spans, locate_line
from lintscope.core.constants import (
    CHAINED_MATCH_FALLBACK_PREFIX,
    CHAINED_MATCH_PREFIX,
    LARGE_OBJECT_MIN_PROPERTIES,
)
from lintscope.core.models import CodeIssue, FileChange, IssueCategory, Severity

# One level only: a `for (...) {` whose body reaches another `for (...)`
# before the first closing brace.
NESTED_LOOP_PATTERN = re.compile(r"for\s*\([^{]*\)\s*\{[^}]*for\s*\([^{]*\)")

_ARRAY_METHODS = r"(map|filter|forEach|reduce|find|some|every)"
CHAINED_ARRAY_PATTERN = re.compile(
    rf"\.{_ARRAY_METHODS}\s*\([^)]*\)\s*\.{_ARRAY_METHODS}"
)

OBJECT_LITERAL_OPENER = re.compile(r"const\s+\w+\s*=\s*\{")
LINE_COMMENT_PATTERN = re.compile(r"//.*$", re.MULTILINE)


class PerformanceAnalyzer(Analyzer):
    """Detects nested loops, chained array passes and oversized object literals."""

    name = "performance_analyzer"
    category = IssueCategory.PERFORMANCE

    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        content = change.text
        return [
            *self._nested_loops(change.filename, content),
            *self._chained_array_methods(change.filename, content),
            *self._large_object_literals(change.filename, content),
        ]

    def _nested_loops(self, filename: str, content: str) -> list[CodeIssue]:
        issues: list[CodeIssue] = []
        for match in NESTED_LOOP_PATTERN.finditer(content):
            snippet = match.group(0)
            issues.append(
                self._issue(
                    "nested-loop",
                    title="Nested Loop Detected",
                    description="Nested loops can lead to O(n²) time complexity",
                    severity=Severity.WARNING,
                    file=filename,
                    line=locate_line(content, snippet),
                    snippet=snippet,
                    remediation="Consider alternatives like using hash maps or optimizing the algorithm",
                )
            )
        return issues

    def _chained_array_methods(self, filename: str, content: str) -> list[CodeIssue]:
        # Chains usually span lines, so match against the flattened text and
        # map each hit back to a line by its prefix.
        lines = content.split("\n")
        flattened = " ".join(lines)

        issues: list[CodeIssue] = []
        for match in CHAINED_ARRAY_PATTERN.finditer(flattened):
            snippet = match.group(0)
            issues.append(
                self._issue(
                    "chained-array-methods",
                    title="Chained Array Methods",
                    description="Multiple chained array methods create unnecessary intermediate arrays",
                    severity=Severity.WARNING,
                    file=filename,
                    line=_line_of_flattened_match(content, lines, snippet),
                    snippet=snippet,
                    remediation="Consider combining operations into a single method or using a for loop",
                )
            )
        return issues

    def _large_object_literals(self, filename: str, content: str) -> list[CodeIssue]:
        stripped = LINE_COMMENT_PATTERN.sub("", content)

        issues: list[CodeIssue] = []
        for _, block in iter_brace_spans(stripped.split("\n"), OBJECT_LITERAL_OPENER):
            property_count = block.count(",") + 1
            if property_count < LARGE_OBJECT_MIN_PROPERTIES:
                continue
            issues.append(
                self._issue(
                    "large-object",
                    title="Large Object Literal",
                    description=(
                        f"Large object literal with approximately {property_count} "
                        "properties may impact performance and memory usage"
                    ),
                    severity=Severity.SUGGESTION,
                    file=filename,
                    line=locate_line(content, block.split("\n")[0]),
                    remediation="Consider breaking down large objects or lazy loading properties",
                )
            )
        return issues


def _line_of_flattened_match(content: str, lines: list[str], snippet: str) -> int:
    prefix = snippet[:CHAINED_MATCH_PREFIX]
    for number, line in enumerate(lines, start=1):
        if prefix in line:
            return number
    return locate_line(content, snippet[:CHAINED_MATCH_FALLBACK_PREFIX])


def analyze_performance_issues(changes: list[FileChange]) -> list[CodeIssue]:
    return PerformanceAnalyzer().analyze(changes)
