# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineScan package.

LineScan splits text into logical lines and line-start offsets in a single
pass, recognizing the Unicode line terminators and whitespace code points used
by source-processing tools. It also ships byte-order-mark helpers, fixed-width
padding helpers, and a small CLI for inspecting files.
"""

from __future__ import annotations

from linescan.text.bom import (
    ByteOrderMark,
    add_utf8_byte_order_mark,
    detect_byte_order_mark,
    get_byte_order_mark,
    get_byte_order_mark_length,
    remove_byte_order_mark,
)
from linescan.text.padding import pad_left, pad_right
from linescan.text.positions import (
    Position,
    offset_to_position,
    position_to_offset,
    utf16_offset,
    utf16_offsets,
)
from linescan.text.scanner import (
    LineStarts,
    LinesAndLineStarts,
    compute_line_starts,
    get_lines_and_line_starts,
    split_lines,
)

__all__ = [
    "ByteOrderMark",
    "LineStarts",
    "LinesAndLineStarts",
    "Position",
    "add_utf8_byte_order_mark",
    "compute_line_starts",
    "detect_byte_order_mark",
    "get_byte_order_mark",
    "get_byte_order_mark_length",
    "get_lines_and_line_starts",
    "offset_to_position",
    "pad_left",
    "pad_right",
    "position_to_offset",
    "remove_byte_order_mark",
    "split_lines",
    "utf16_offset",
    "utf16_offsets",
]
