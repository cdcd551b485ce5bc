# topmark:header:start
#
#   project      : LineScan
#   file         : scanner.py
#   file_relpath : src/linescan/text/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass line scanner.

Splits a text into logical lines and the offsets at which they begin. All three
public entry points share one linear scan ([`_scan`][linescan.text.scanner._scan])
that can collect lines, line starts, or both, and optionally drop lines holding
only whitespace.

Line terminators are CR, LF, CRLF (one break), U+2028 and U+2029. The trailing
segment after the last terminator is always flushed, so an input ending on a
terminator yields a final empty line, and ``""`` yields ``[""]``.

Offsets are indices into the ``str`` that was scanned. See
[`linescan.text.positions.utf16_offset`][] for UTF-16 code-unit offsets.

Examples:
    ```python
    >>> split_lines("a\\r\\nb")
    ['a', 'b']
    >>> compute_line_starts("a\\r\\nb")
    (0, 3)
    >>> split_lines("a\\n \\nb", remove_empty_elements=True)
    ['a', 'b']
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from linescan.config.logging import get_logger
from linescan.text.codes import CHAR_CLASSES, CR, LF, CharClass

if TYPE_CHECKING:
    from linescan.config.logging import LinescanLogger

logger: LinescanLogger = get_logger(__name__)

LineStarts = tuple[int, ...]


@dataclass(frozen=True)
class LinesAndLineStarts:
    """Lines of a text together with the offset at which each line begins.

    Attributes:
        lines (tuple[str, ...]): The lines, terminators excluded.
        line_starts (LineStarts): ``line_starts[i]`` is the offset of ``lines[i]``
            in the scanned text.
    """

    lines: tuple[str, ...]
    line_starts: LineStarts


def _scan(
    text: str,
    *,
    collect_lines: bool,
    collect_starts: bool,
    remove_empty: bool,
) -> tuple[list[str], list[int]]:
    """Scan ``text`` once and collect the requested outputs.

    Args:
        text (str): The text to scan.
        collect_lines (bool): Collect line strings.
        collect_starts (bool): Collect line-start offsets.
        remove_empty (bool): Skip lines with no content code unit. Only affects
            the collected lines; line starts are always recorded for every line.

    Returns:
        tuple[list[str], list[int]]: ``(lines, line_starts)``; a list stays empty
            when it was not requested.
    """
    lines: list[str] = []
    line_starts: list[int] = []
    length: int = len(text)
    pos: int = 0
    end: int = 0
    line_start: int = 0
    non_whitespace: bool = False

    while pos < length:
        code: int = ord(text[pos])
        end = pos
        pos += 1
        char_class: CharClass | None = CHAR_CLASSES.get(code)

        if char_class is CharClass.TERMINATOR:
            # CRLF is a single line break
            if code == CR and pos < length and ord(text[pos]) == LF:
                pos += 1
            if collect_starts:
                line_starts.append(line_start)
            if collect_lines and (not remove_empty or non_whitespace):
                lines.append(text[line_start:end])
            line_start = pos
            non_whitespace = False
        elif char_class is None:
            non_whitespace = True

    if collect_starts:
        line_starts.append(line_start)
    if collect_lines and (not remove_empty or non_whitespace):
        lines.append(text[line_start:length])

    logger.trace(
        "scan: %d code unit(s) -> %d line(s), %d line start(s) (remove_empty=%s)",
        length,
        len(lines),
        len(line_starts),
        remove_empty,
    )
    return lines, line_starts


def get_lines_and_line_starts(text: str) -> LinesAndLineStarts:
    """Return the lines of ``text`` and their start offsets.

    Empty lines are always kept so both sequences have the same length.

    Args:
        text (str): The text to split.

    Returns:
        LinesAndLineStarts: Pointwise aligned lines and line starts.
    """
    lines, line_starts = _scan(
        text,
        collect_lines=True,
        collect_starts=True,
        remove_empty=False,
    )
    return LinesAndLineStarts(lines=tuple(lines), line_starts=tuple(line_starts))


def split_lines(text: str, remove_empty_elements: bool = False) -> list[str]:
    """Split ``text`` into lines.

    Args:
        text (str): The text to split.
        remove_empty_elements (bool): Drop lines that are empty or contain only
            whitespace code units.

    Returns:
        list[str]: The lines, terminators excluded.
    """
    lines, _ = _scan(
        text,
        collect_lines=True,
        collect_starts=False,
        remove_empty=remove_empty_elements,
    )
    return lines


def compute_line_starts(text: str) -> LineStarts:
    """Return the offset at which each line of ``text`` begins.

    The first entry is always ``0``.

    Args:
        text (str): The text to scan.

    Returns:
        LineStarts: Strictly increasing line-start offsets.
    """
    _, line_starts = _scan(
        text,
        collect_lines=False,
        collect_starts=True,
        remove_empty=False,
    )
    return tuple(line_starts)
