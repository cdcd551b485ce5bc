# topmark:header:start
#
#   project      : LineScan
#   file         : test_positions.py
#   file_relpath : tests/text/test_positions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for offset/position conversion and UTF-16 offsets."""

from __future__ import annotations

from linescan.text.positions import (
    Position,
    offset_to_position,
    position_to_offset,
    utf16_offset,
    utf16_offsets,
)
from linescan.text.scanner import compute_line_starts
from tests.conftest import mark_text, parametrize

TEXT = "ab\r\ncd\n\nefg"
STARTS = compute_line_starts(TEXT)


@mark_text
@parametrize(
    "offset, expected",
    [
        (0, Position(0, 0)),
        (1, Position(0, 1)),
        (2, Position(0, 2)),
        (4, Position(1, 0)),
        (6, Position(1, 2)),
        (7, Position(2, 0)),
        (8, Position(3, 0)),
        (10, Position(3, 2)),
        (99, Position(3, 91)),
        (-3, Position(0, -3)),
    ],
)
def test_offset_to_position(offset: int, expected: Position) -> None:
    """Offsets resolve to the last line starting at or before them."""
    assert STARTS == (0, 4, 7, 8)
    assert offset_to_position(STARTS, offset) == expected


@mark_text
def test_position_to_offset_inverts_offset_to_position() -> None:
    """Every in-range offset survives a round trip through a position."""
    for offset in range(len(TEXT) + 1):
        assert position_to_offset(STARTS, offset_to_position(STARTS, offset)) == offset


@mark_text
def test_position_to_offset_clamps_line() -> None:
    """Lines beyond the last are clamped; columns are used as given."""
    assert position_to_offset(STARTS, Position(10, 1)) == 9
    assert position_to_offset(STARTS, Position(-1, 0)) == 0


@mark_text
def test_utf16_offset_counts_astral_characters_twice() -> None:
    """Characters outside the BMP take two UTF-16 code units."""
    text = "a\U0001f600b"
    assert [utf16_offset(text, i) for i in range(4)] == [0, 1, 3, 4]
    assert utf16_offset(text, 99) == 4
    assert utf16_offset(text, -1) == 0


@mark_text
def test_utf16_offset_counts_lone_surrogates_once() -> None:
    """A lone surrogate is a single code unit."""
    assert utf16_offset("\ud800x", 2) == 2


@mark_text
def test_utf16_offsets_matches_single_lookups() -> None:
    """The batch conversion agrees with per-index conversion, in any order."""
    text = "\U0001f600\n\U0001f601x\ny"
    starts = compute_line_starts(text)
    assert starts == (0, 2, 5)
    assert utf16_offsets(text, starts) == (0, 3, 7)

    unordered = [5, 0, 3, 3, 1]
    assert utf16_offsets(text, unordered) == tuple(utf16_offset(text, i) for i in unordered)
