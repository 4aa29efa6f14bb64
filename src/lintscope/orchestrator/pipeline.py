"""Pipeline orchestrator: run every analyzer over a PR and aggregate."""

from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone

from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.registry import create_all_analyzers
from lintscope.core.config import Settings
from lintscope.core.exceptions import AnalysisTimeoutError
from lintscope.core.logging import get_logger
from lintscope.core.models import (
    AnalysisMetadata,
    AnalysisResult,
    CodeIssue,
    FileChange,
    PullRequestPayload,
    ReviewFeedback,
)
from lintscope.feedback.generator import generate_feedback
from lintscope.orchestrator.aggregator import summarize_issues

logger = get_logger(__name__)


def extract_code_from_pr(payload: PullRequestPayload) -> list[FileChange]:
    """Return the file changes to analyze.

    Changes are passed through as-is; fetching file content is the job of
    whoever builds the payload.
    """
    logger.info("extracting_code", pr_id=payload.id, files=len(payload.changes))
    return list(payload.changes)


def _build_result(
    payload: PullRequestPayload, issues: list[CodeIssue], start_ms: int
) -> AnalysisResult:
    summary = summarize_issues(issues)
    duration = (time.perf_counter_ns() // 1_000_000) - start_ms

    logger.info(
        "analysis_complete",
        pr_id=payload.id,
        total_issues=summary.total_issues,
        critical=summary.critical_count,
        duration_ms=duration,
    )

    return AnalysisResult(
        pr_id=payload.id,
        issues=issues,
        summary=summary,
        metadata=AnalysisMetadata(analyzed_at=datetime.now(timezone.utc), duration=duration),
    )


def analyze_pull_request(
    payload: PullRequestPayload,
    analyzers: list[Analyzer] | None = None,
) -> AnalysisResult:
    """Run all analyzers sequentially and return the aggregated result.

    Issues are concatenated in analyzer order (Security, Performance,
    CodeStyle, Maintainability, Architecture by default).

    Args:
        payload: The pull request to analyze.
        analyzers: Optional pre-created analyzers. Creates all if None.
    """
    start_ms = time.perf_counter_ns() // 1_000_000

    if analyzers is None:
        analyzers = create_all_analyzers()

    logger.info(
        "analysis_started",
        pr_id=payload.id,
        repository=payload.repository,
        branch=payload.branch,
        files=len(payload.changes),
        analyzers=len(analyzers),
    )

    changes = extract_code_from_pr(payload)
    issues: list[CodeIssue] = []
    for analyzer in analyzers:
        issues.extend(analyzer.analyze(changes))

    return _build_result(payload, issues, start_ms)


async def analyze_pull_request_async(
    payload: PullRequestPayload,
    analyzers: list[Analyzer] | None = None,
    max_concurrent: int = 5,
    timeout: float | None = None,
) -> AnalysisResult:
    """Run the analyzers concurrently in worker threads.

    Analyzers share no state, so they are fanned out with ``asyncio.to_thread``
    bounded by a semaphore.  Results keep analyzer order, so the issue list
    matches ``analyze_pull_request`` for the same input.

    Args:
        payload: The pull request to analyze.
        analyzers: Optional pre-created analyzers. Creates all if None.
        max_concurrent: Maximum analyzers running at once.
        timeout: Optional limit in seconds for the whole run.

    Raises:
        AnalysisTimeoutError: if ``timeout`` elapses before all analyzers finish.
    """
    start_ms = time.perf_counter_ns() // 1_000_000

    if analyzers is None:
        analyzers = create_all_analyzers()

    changes = extract_code_from_pr(payload)
    semaphore = asyncio.Semaphore(max_concurrent)

    async def _bounded(analyzer: Analyzer) -> list[CodeIssue]:
        async with semaphore:
            return await asyncio.to_thread(analyzer.analyze, changes)

    logger.info(
        "analysis_started",
        pr_id=payload.id,
        repository=payload.repository,
        files=len(changes),
        analyzers=len(analyzers),
        concurrent=True,
    )

    try:
        results = await asyncio.wait_for(
            asyncio.gather(*(_bounded(a) for a in analyzers)),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        logger.warning("analysis_timeout", pr_id=payload.id, timeout=timeout)
        raise AnalysisTimeoutError(timeout) from e

    issues = [issue for batch in results for issue in batch]
    return _build_result(payload, issues, start_ms)


def run_review(
    payload: PullRequestPayload,
    title: str | None = None,
    settings: Settings | None = None,
    analyzers: list[Analyzer] | None = None,
) -> tuple[AnalysisResult, ReviewFeedback]:
    """Analyze a pull request and generate feedback for it.

    The review title and number of top issues come from ``settings`` unless
    a title is given explicitly.
    """
    settings = settings or Settings()
    result = analyze_pull_request(payload, analyzers)
    feedback = generate_feedback(
        result,
        title=title or settings.review_title,
        top_n=settings.top_issues_limit,
    )
    return result, feedback


async def run_review_async(
    payload: PullRequestPayload,
    title: str | None = None,
    settings: Settings | None = None,
    analyzers: list[Analyzer] | None = None,
) -> tuple[AnalysisResult, ReviewFeedback]:
    """Concurrent variant of ``run_review``.

    Concurrency and the overall timeout come from
    ``settings.max_concurrent_analyzers`` and ``settings.analysis_timeout_seconds``.
    """
    settings = settings or Settings()
    result = await analyze_pull_request_async(
        payload,
        analyzers,
        max_concurrent=settings.max_concurrent_analyzers,
        timeout=settings.analysis_timeout_seconds,
    )
    feedback = generate_feedback(
        result,
        title=title or settings.review_title,
        top_n=settings.top_issues_limit,
    )
    return result, feedback
