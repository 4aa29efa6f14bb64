"""Analyzer registry: discovery and instantiation of analyzers."""

from __future__ import annotations

from lintscope.analyzers.architecture import ArchitectureAnalyzer
from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.maintainability import MaintainabilityAnalyzer
from lintscope.analyzers.performance import PerformanceAnalyzer
from lintscope.analyzers.security import SecurityAnalyzer
from lintscope.analyzers.style import CodeStyleAnalyzer

# All available analyzer classes, in reporting order
ANALYZER_CLASSES: list[type[Analyzer]] = [
    SecurityAnalyzer,
    PerformanceAnalyzer,
    CodeStyleAnalyzer,
    MaintainabilityAnalyzer,
    ArchitectureAnalyzer,
]


def create_all_analyzers() -> list[Analyzer]:
    """Instantiate all registered analyzers."""
    return [cls() for cls in ANALYZER_CLASSES]


def create_analyzers_by_name(names: list[str] | None = None) -> list[Analyzer]:
    """Create analyzers filtered by name. If names is None, create all.

    Args:
        names: Optional list of analyzer names to include
            (e.g. ["security_analyzer", "architecture_analyzer"]).

    Returns:
        List of instantiated analyzers, in reporting order.
    """
    if names is None:
        return create_all_analyzers()

    name_set = set(names)
    return [cls() for cls in ANALYZER_CLASSES if cls.name in name_set]


def get_analyzer_names() -> list[str]:
    """Get the names of all registered analyzers."""
    return [cls.name for cls in ANALYZER_CLASSES]
