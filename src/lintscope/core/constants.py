"""Constants and mappings used across the application."""

from __future__ import annotations

# ── Analyzer Thresholds ──────────────────────────────────────────────────────

# Brace depth above which a file is reported as deeply nested
MAX_NESTING_DEPTH: int = 4

# A function body spanning more lines than this is reported
MAX_FUNCTION_LINES: int = 15

# Brace-delimited blocks at least this long are checked for statement count
LONG_BLOCK_MIN_CHARS: int = 500
LONG_BLOCK_MAX_STATEMENTS: int = 15

# Object literals with at least this many (comma-estimated) properties
LARGE_OBJECT_MIN_PROPERTIES: int = 10

# Prefix lengths used to re-locate matches made against flattened content
CHAINED_MATCH_PREFIX: int = 20
CHAINED_MATCH_FALLBACK_PREFIX: int = 10

# ── Scoring ──────────────────────────────────────────────────────────────────

MAX_SCORE: int = 100

SEVERITY_WEIGHTS: dict[str, int] = {
    "Critical": 10,
    "Warning": 3,
    "Suggestion": 1,
}

SEVERITY_ORDER: dict[str, int] = {
    "Critical": 0,
    "Warning": 1,
    "Suggestion": 2,
}

# ── Feedback ─────────────────────────────────────────────────────────────────

DEFAULT_REVIEW_TITLE: str = "AI Code Review"
DEFAULT_TOP_ISSUES: int = 5

SEVERITY_EMOJI: dict[str, str] = {
    "Critical": "🚨",
    "Warning": "⚠️",
    "Suggestion": "💡",
}

CATEGORY_EXPLANATIONS: dict[str, str] = {
    "Security": "Security issues can lead to vulnerabilities that may be exploited by attackers.",
    "Performance": "Performance issues can cause your application to run slowly or use excessive resources.",
    "CodeStyle": "Code style issues affect readability and maintainability of your codebase.",
    "Maintainability": "Maintainability issues make your code harder to understand, modify, or extend.",
    "Architecture": "Architectural issues can lead to design problems that affect the entire system.",
}

DEFAULT_CATEGORY_EXPLANATION: str = "This issue affects the quality of your code."

MARKDOWN_FOOTER: str = "*Generated by AI-Powered Code Review Assistant*"

# ── Architecture Layers (path marker → layer name) ───────────────────────────

# Checked in order; the first matching marker wins.
LAYER_MARKERS: list[tuple[tuple[str, ...], str]] = [
    (("/models/", "/entities/"), "data"),
    (("/controllers/", "/handlers/"), "controller"),
    (("/services/",), "service"),
    (("/views/", "/components/"), "view"),
    (("/utils/", "/helpers/"), "utility"),
]
