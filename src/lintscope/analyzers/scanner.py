"""Text scanning helpers shared by the analyzers.

Everything here works on raw source text with no notion of strings or
comments, so braces inside literals count like any other brace.  Results are
heuristic positions, not semantic locations.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator


def locate_line(content: str, substring: str) -> int:
    """Return the 1-based line of the first occurrence of ``substring``.

    Returns 1 when the substring does not occur.  Because only the first
    occurrence is considered, repeated matches all resolve to the same line;
    callers treat the result as an approximation.
    """
    index = content.find(substring)
    if index == -1:
        return 1
    return content.count("\n", 0, index) + 1


def brace_delta(text: str) -> int:
    """Number of opening braces minus number of closing braces."""
    return text.count("{") - text.count("}")


def max_brace_depth(text: str) -> int:
    """Deepest brace nesting reached while scanning ``text`` left to right.

    Unbalanced closing braces push the running depth below zero.
    """
    depth = 0
    deepest = 0
    for char in text:
        if char == "{":
            depth += 1
            deepest = max(deepest, depth)
        elif char == "}":
            depth -= 1
    return deepest


def find_block_end(text: str, start: int) -> int | None:
    """Find the end of the first brace block at or after ``start``.

    Returns the index just past the ``}`` that brings the count back to zero
    after at least one ``{`` was seen, or ``None`` if the block never closes.
    A ``}`` met before the first ``{`` still decrements the count.
    """
    count = 0
    opened = False
    for index in range(start, len(text)):
        char = text[index]
        if char == "{":
            opened = True
            count += 1
        elif char == "}":
            count -= 1
            if opened and count == 0:
                return index + 1
    return None


def iter_brace_spans(lines: Iterable[str], opener: re.Pattern[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(start_index, block)`` for line-delimited brace blocks.

    A block starts on a line matching ``opener`` and ends on the first
    following line where the running brace delta reaches zero.  The opening
    line's own delta is not checked, so a one-line ``{}`` keeps collecting
    until a later line balances.  Blocks still open at the end are dropped.
    """
    collecting = False
    start = 0
    depth = 0
    block: list[str] = []

    for index, line in enumerate(lines):
        if not collecting:
            if opener.search(line):
                collecting = True
                start = index
                depth = brace_delta(line)
                block = [line]
            continue

        block.append(line)
        depth += brace_delta(line)
        if depth == 0:
            yield start, "\n".join(block)
            collecting = False
            block = []
