"""Shared test fixtures for all Lintscope tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lintscope.core.models import (
    AnalysisMetadata,
    AnalysisResult,
    CodeIssue,
    FileChange,
    FileStatus,
    IssueCategory,
    IssueLocation,
    PullRequestPayload,
    Severity,
)
from lintscope.orchestrator.aggregator import summarize_issues


def _payload(changes: list[FileChange], pr_id: str | int = 123) -> PullRequestPayload:
    return PullRequestPayload(
        id=pr_id,
        title="Test PR",
        branch="feature/test",
        base="main",
        repository="test-repo",
        author="test-user",
        changes=changes,
    )


@pytest.fixture
def make_payload():
    """Factory fixture building a PullRequestPayload around a list of changes."""
    return _payload


@pytest.fixture
def security_file() -> FileChange:
    return FileChange(
        filename="src/auth/login.ts",
        status=FileStatus.MODIFIED,
        content=(
            "function login(username, password) {\n"
            "  const query = \"SELECT * FROM users WHERE username = '\" + username + \"'\";\n"
            "  const apiKey = \"1234567890abcdef\";\n"
            "  document.innerHTML = \"<div>\" + userInput + \"</div>\";\n"
            "}\n"
        ),
    )


@pytest.fixture
def performance_file() -> FileChange:
    return FileChange(
        filename="src/utils/dataProcessor.ts",
        status=FileStatus.MODIFIED,
        content=(
            "function processData(items) {\n"
            "  for (let i = 0; i < items.length; i++) {\n"
            "    for (let j = 0; j < items.length; j++) {\n"
            "      check(items[i], items[j]);\n"
            "    }\n"
            "  }\n"
            "  const result = items\n"
            "    .map(x => x * 2)\n"
            "    .filter(x => x > 10);\n"
            "  const config = {\n"
            "    option1: true,\n"
            "    option2: false,\n"
            "    option3: 'value3',\n"
            "    option4: 123,\n"
            "    option5: null,\n"
            "    option6: undefined,\n"
            "    option7: 'seven',\n"
            "    option8: 'eight',\n"
            "    option9: 'nine',\n"
            "    option10: 'ten',\n"
            "    option11: true\n"
            "  };\n"
            "}\n"
        ),
    )


@pytest.fixture
def sample_issues() -> list[CodeIssue]:
    return [
        CodeIssue(
            id="security-1",
            title="Hardcoded API Key",
            description="Found potential hardcoded API key in the code",
            category=IssueCategory.SECURITY,
            severity=Severity.CRITICAL,
            location=IssueLocation(file="src/auth/auth.service.ts", line=42),
            snippet='const apiKey = "1234567890abcdef";',
            remediation="Use environment variables or a secure secrets manager instead of hardcoding API keys",
        ),
        CodeIssue(
            id="performance-1",
            title="Nested Loop Detected",
            description="Nested loops can lead to O(n²) time complexity",
            category=IssueCategory.PERFORMANCE,
            severity=Severity.WARNING,
            location=IssueLocation(file="src/data/processor.ts", line=156),
            snippet="for (let i = 0; i < n; i++) {\n  for (let j = 0; j < n; j++) {",
            remediation="Consider alternatives like using hash maps or optimizing the algorithm",
        ),
        CodeIssue(
            id="style-1",
            title="Console Statement",
            description="Console statements should not be committed to production code",
            category=IssueCategory.CODE_STYLE,
            severity=Severity.SUGGESTION,
            location=IssueLocation(file="src/components/user-list.ts", line=78),
            snippet='console.log("Rendering user list");',
            remediation="Remove console statements or use a proper logging library",
        ),
        CodeIssue(
            id="architecture-1",
            title="Layer Violation",
            description="Data access in controller layer",
            category=IssueCategory.ARCHITECTURE,
            severity=Severity.WARNING,
            location=IssueLocation(file="src/controllers/user.controller.ts", line=25),
            remediation="Move data access code to the service layer",
        ),
    ]


@pytest.fixture
def sample_analysis(sample_issues: list[CodeIssue]) -> AnalysisResult:
    return AnalysisResult(
        pr_id=123,
        issues=sample_issues,
        summary=summarize_issues(sample_issues),
        metadata=AnalysisMetadata(
            analyzed_at=datetime(2023, 6, 1, 12, 0, tzinfo=timezone.utc),
            duration=1500,
        ),
    )
