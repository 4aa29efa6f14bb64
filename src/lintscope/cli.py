"""Command-line entry point: review a pull request payload stored as JSON.

Usage::

    lintscope payload.json
    lintscope payload.json --format json --output review.json
    lintscope payload.json --title "Nightly Review" --format html

The payload file holds a ``PullRequestPayload`` (id, title, branch, base,
repository, author and a ``changes`` list with each file's full content).
Logs go to stderr so the rendered review can be piped.

Exit status: 0 on success, 1 when ``--fail-on-critical`` is set and a
Critical issue was found, 2 for an unreadable or invalid payload, 3 when
``LINTSCOPE_ANALYSIS_TIMEOUT_SECONDS`` elapsed before the analyzers finished.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from lintscope import __version__
from lintscope.analyzers.base import Analyzer
from lintscope.analyzers.registry import create_analyzers_by_name, get_analyzer_names
from lintscope.core.config import Settings, get_settings
from lintscope.core.exceptions import AnalysisTimeoutError, InvalidPayloadError
from lintscope.core.logging import get_logger, setup_logging
from lintscope.core.models import (
    AnalysisResult,
    PullRequestPayload,
    ReviewFeedback,
    parse_payload,
)
from lintscope.feedback.markdown import generate_html_summary
from lintscope.orchestrator.pipeline import run_review_async

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CRITICAL_FOUND = 1
EXIT_USAGE = 2
EXIT_TIMEOUT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lintscope",
        description="Rule-based review of the files changed in a pull request",
    )
    parser.add_argument("payload", type=Path, help="Path to the pull request payload (JSON)")
    parser.add_argument("--title", help="Review title (defaults to LINTSCOPE_REVIEW_TITLE)")
    parser.add_argument(
        "--format",
        choices=["markdown", "html", "json"],
        default="markdown",
        help="Output format: Markdown summary, HTML fragment, or the full feedback as JSON",
    )
    parser.add_argument("--output", type=Path, metavar="FILE", help="Write the review to FILE instead of stdout")
    parser.add_argument(
        "--analyzers",
        nargs="+",
        choices=get_analyzer_names(),
        metavar="NAME",
        help=f"Run only these analyzers (choices: {', '.join(get_analyzer_names())})",
    )
    parser.add_argument("--log-level", help="Override LINTSCOPE_LOG_LEVEL")
    parser.add_argument(
        "--fail-on-critical",
        action="store_true",
        help="Exit with status 1 when any Critical issue is found",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render(feedback: ReviewFeedback, output_format: str) -> str:
    """Render the review in the requested output format."""
    if output_format == "json":
        return feedback.model_dump_json(indent=2)
    if output_format == "html":
        return generate_html_summary(feedback.summary_report)
    return feedback.markdown_summary


def _run_review(
    payload: PullRequestPayload,
    title: str | None,
    settings: Settings,
    analyzers: list[Analyzer] | None,
) -> tuple[AnalysisResult, ReviewFeedback]:
    """Run the concurrent review on a private event loop.

    The loop's worker pool is shut down without waiting, so a timeout returns
    as soon as it fires. Analyzer threads still running at that point are
    abandoned; the interpreter joins them at process exit.
    """
    loop = asyncio.new_event_loop()
    executor = ThreadPoolExecutor(max_workers=settings.max_concurrent_analyzers)
    loop.set_default_executor(executor)
    try:
        return loop.run_until_complete(
            run_review_async(payload, title=title, settings=settings, analyzers=analyzers)
        )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
        loop.close()


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()

    level = args.log_level or ("DEBUG" if settings.debug else settings.log_level)
    setup_logging(level, stream=sys.stderr)

    try:
        payload = parse_payload(json.loads(args.payload.read_text(encoding="utf-8")))
    except (OSError, ValueError) as e:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        logger.error("payload_unreadable", path=str(args.payload), error=str(e))
        return EXIT_USAGE
    except InvalidPayloadError as e:
        logger.error("payload_invalid", path=str(args.payload), detail=e.detail)
        return EXIT_USAGE

    analyzers = create_analyzers_by_name(args.analyzers) if args.analyzers else None

    try:
        result, feedback = _run_review(payload, args.title, settings, analyzers)
    except AnalysisTimeoutError as e:
        logger.error("review_failed", pr_id=payload.id, detail=e.detail)
        return EXIT_TIMEOUT

    text = render(feedback, args.format)
    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info("review_written", path=str(args.output), format=args.format)
    else:
        sys.stdout.write(text + "\n")

    if args.fail_on_critical and result.summary.critical_count:
        return EXIT_CRITICAL_FOUND
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
