"""Architecture analyzer.

Unlike the other analyzers this one reasons across files: each file is
assigned a layer from its path, and pairs of files are checked for mutual
imports.
"""

from __future__ import annotations

import re
import time
from pathlib import PurePosixPath

from lintscope.analyzers.base import Analyzer
from lintscope.core.constants import LAYER_MARKERS
from lintscope.core.logging import get_logger
from lintscope.core.models import CodeIssue, FileChange, IssueCategory, Layer, Severity

logger = get_logger(__name__)

DATA_ACCESS_MARKERS: tuple[str, ...] = ("new Model", ".findOne", ".save()")
VIEW_MARKERS: tuple[str, ...] = ("render", "template", "html")


def classify_layer(filename: str) -> Layer:
    """Map a file path to its architectural layer by path substring."""
    for markers, layer in LAYER_MARKERS:
        if any(marker in filename for marker in markers):
            return Layer(layer)
    return Layer.UNKNOWN


def module_stem(filename: str) -> str:
    """File name without directories or its final extension."""
    return PurePosixPath(filename).stem


def imports_module(content: str, stem: str) -> bool:
    """Whether ``content`` has an ES import or CommonJS require ending in ``stem``."""
    escaped = re.escape(stem)
    import_pattern = re.compile(rf"""import.*from\s+['"].*{escaped}['"]""", re.IGNORECASE)
    require_pattern = re.compile(rf"""require\(['"].*{escaped}['"]\)""", re.IGNORECASE)
    return bool(import_pattern.search(content) or require_pattern.search(content))


class ArchitectureAnalyzer(Analyzer):
    """Detects layer violations and circular dependencies between changed files."""

    name = "architecture_analyzer"
    category = IssueCategory.ARCHITECTURE

    def analyze(self, changes: list[FileChange]) -> list[CodeIssue]:
        start_ms = time.perf_counter_ns() // 1_000_000

        issues: list[CodeIssue] = []
        for change in changes:
            issues.extend(self._layer_violations(change))
            issues.extend(self._circular_dependencies(change, changes))

        logger.debug(
            "analyzer_complete",
            analyzer=self.name,
            files=len(changes),
            issues=len(issues),
            duration_ms=(time.perf_counter_ns() // 1_000_000) - start_ms,
        )
        return issues

    def analyze_file(self, change: FileChange) -> list[CodeIssue]:
        """Layer checks only; cycles need the whole change set."""
        return self._layer_violations(change)

    def _layer_violations(self, change: FileChange) -> list[CodeIssue]:
        content = change.text
        layer = classify_layer(change.filename)
        issues: list[CodeIssue] = []

        if layer == Layer.CONTROLLER and any(m in content for m in DATA_ACCESS_MARKERS):
            issues.append(
                self._issue(
                    "layer-violation",
                    title="Architectural Layer Violation",
                    description="Direct data access in controller layer",
                    severity=Severity.WARNING,
                    file=change.filename,
                    remediation="Move data access code to the service layer or repository layer",
                )
            )

        if layer == Layer.SERVICE and any(m in content for m in VIEW_MARKERS):
            issues.append(
                self._issue(
                    "view-in-service",
                    title="View Logic in Service",
                    description="View-related code found in service layer",
                    severity=Severity.WARNING,
                    file=change.filename,
                    remediation="Move view logic to appropriate view/template layer",
                )
            )

        return issues

    def _circular_dependencies(
        self, change: FileChange, changes: list[FileChange]
    ) -> list[CodeIssue]:
        # Every ordered pair of distinct files.
        content = change.text
        own_stem = module_stem(change.filename)
        issues: list[CodeIssue] = []

        for other in changes:
            if other.filename == change.filename:
                continue
            if not imports_module(content, module_stem(other.filename)):
                continue
            if own_stem not in other.text:
                continue
            issues.append(
                self._issue(
                    "circular-dependency",
                    title="Circular Dependency",
                    description=f"Circular dependency between {change.filename} and {other.filename}",
                    severity=Severity.WARNING,
                    file=change.filename,
                    remediation=(
                        "Refactor code to break the circular dependency, possibly by "
                        "extracting common code to a third module"
                    ),
                )
            )

        return issues


def analyze_architectural_issues(changes: list[FileChange]) -> list[CodeIssue]:
    return ArchitectureAnalyzer().analyze(changes)
