"""PROMISE lines of code.

A line counts unless it is blank or a pure comment line. Pure comment lines
start with ``//`` or ``*``, open a block comment that stays open, lie inside
an open block comment, or close a block comment with nothing but another
comment after ``*/``. A line with any code on it counts once.

``/*`` inside string literals is not recognised; files that put comment
openers in strings can be miscounted.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

# Characters removed from both ends of a line: controls and space.
_TRIM = "".join(chr(c) for c in range(0x21))


class ScanState(Enum):
    NORMAL = "normal"
    IN_BLOCK = "in_block"


def _has_code_after_close(trimmed: str) -> bool:
    tail = trimmed[trimmed.index("*/") + 2 :].strip(_TRIM)
    return bool(tail) and not tail.startswith(("//", "/*"))


def count_loc(lines: Sequence[str], start_line: int, end_line: int) -> int:
    """Count qualifying lines in the inclusive 1-indexed range.

    Lines outside ``1..len(lines)`` are ignored, so out-of-range bounds are
    clamped and an inverted range yields 0.
    """
    loc = 0
    state = ScanState.NORMAL

    for index in range(max(start_line, 1), min(end_line, len(lines)) + 1):
        trimmed = lines[index - 1].strip(_TRIM)
        if not trimmed:
            continue

        if state is ScanState.IN_BLOCK:
            if "*/" in trimmed:
                state = ScanState.NORMAL
                if _has_code_after_close(trimmed):
                    loc += 1
            continue

        if trimmed.startswith("/*"):
            if "*/" in trimmed:
                if _has_code_after_close(trimmed):
                    loc += 1
            else:
                state = ScanState.IN_BLOCK
            continue

        if trimmed.startswith(("//", "*")):
            continue

        loc += 1

    return loc


def count_file_loc(source: str) -> int:
    """PROMISE LOC of a whole buffer."""
    lines = source.split("\n")
    return count_loc(lines, 1, len(lines))
