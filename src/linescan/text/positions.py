# topmark:header:start
#
#   project      : LineScan
#   file         : positions.py
#   file_relpath : src/linescan/text/positions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line/column addressing on top of line starts.

Converts between flat offsets and zero-based ``(line, column)`` positions using
the line starts computed by [`linescan.text.scanner.compute_line_starts`][].
Lookups are binary searches, so a caller computes line starts once and resolves
many offsets against them.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linescan.text.scanner import LineStarts

# First code point outside the Basic Multilingual Plane
_FIRST_ASTRAL: int = 0x10000


@dataclass(frozen=True)
class Position:
    """A zero-based line/column position.

    Attributes:
        line (int): Index into the line starts.
        column (int): Offset from the start of the line.
    """

    line: int
    column: int


def offset_to_position(line_starts: LineStarts, offset: int) -> Position:
    """Return the position of ``offset``.

    Offsets before 0 resolve to line 0; offsets past the last line start resolve
    to the last line with a column counted from that line's start.

    Args:
        line_starts (LineStarts): Line starts of the text; must not be empty.
        offset (int): The offset to resolve.

    Returns:
        Position: The zero-based position of ``offset``.
    """
    line: int = max(bisect_right(line_starts, offset) - 1, 0)
    return Position(line=line, column=offset - line_starts[line])


def position_to_offset(line_starts: LineStarts, position: Position) -> int:
    """Return the offset of ``position``.

    The line is clamped to the available lines; the column is used as-is.

    Args:
        line_starts (LineStarts): Line starts of the text; must not be empty.
        position (Position): The position to resolve.

    Returns:
        int: The offset of ``position``.
    """
    line: int = min(max(position.line, 0), len(line_starts) - 1)
    return line_starts[line] + position.column


def utf16_offset(text: str, index: int) -> int:
    """Convert a ``str`` index into a UTF-16 code-unit offset.

    Characters outside the BMP occupy two UTF-16 code units; every other
    character (including lone surrogates) occupies one.

    Args:
        text (str): The text ``index`` refers to.
        index (int): An index into ``text``; clamped to ``len(text)``.

    Returns:
        int: The UTF-16 offset of ``index``.
    """
    prefix: str = text[: max(index, 0)]
    return len(prefix) + sum(1 for ch in prefix if ord(ch) >= _FIRST_ASTRAL)


def utf16_offsets(text: str, indices: Iterable[int]) -> tuple[int, ...]:
    """Convert non-decreasing ``str`` indices into UTF-16 code-unit offsets.

    Equivalent to calling [`utf16_offset`][linescan.text.positions.utf16_offset]
    for each index, in a single pass over ``text``.

    Args:
        text (str): The text the indices refer to.
        indices (Iterable[int]): Non-decreasing indices, such as line starts.

    Returns:
        tuple[int, ...]: The UTF-16 offset of each index.
    """
    out: list[int] = []
    pos: int = 0
    astral: int = 0
    for index in indices:
        index = min(max(index, 0), len(text))
        if index < pos:
            # Not monotonic: restart the count from the beginning
            pos, astral = 0, 0
        astral += sum(1 for ch in text[pos:index] if ord(ch) >= _FIRST_ASTRAL)
        pos = index
        out.append(index + astral)
    return tuple(out)
