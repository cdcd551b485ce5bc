# topmark:header:start
#
#   project      : LineScan
#   file         : bom.py
#   file_relpath : src/linescan/text/bom.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-order-mark helpers.

These helpers look at the raw code-unit *values* at the start of a text. They
expect text whose bytes were mapped one-to-one onto code units (for instance
``data.decode("latin-1")``), so that a UTF-8 BOM appears as the three code units
``"\\xef\\xbb\\xbf"`` and a UTF-16 BOM as ``"\\xff\\xfe"`` or ``"\\xfe\\xff"``.

The single code point U+FEFF (what a UTF-8 decoder yields for a BOM) is *not*
recognized here. No byte swapping is performed.
"""

from __future__ import annotations

from enum import IntEnum

from linescan.constants import UTF8_BOM, UTF16_BE_BOM, UTF16_LE_BOM


class ByteOrderMark(IntEnum):
    """Kind of leading byte-order mark, valued by its length in code units.

    Attributes:
        NONE: No byte-order mark.
        UTF16: UTF-16 BOM, either endianness (2 code units).
        UTF8: UTF-8 BOM (3 code units).
    """

    NONE = 0
    UTF16 = 2
    UTF8 = 3


def detect_byte_order_mark(text: str) -> ByteOrderMark:
    """Return the kind of byte-order mark ``text`` starts with.

    The UTF-16 check runs first and short-circuits the UTF-8 check.

    Args:
        text (str): Text whose code units mirror the raw bytes.

    Returns:
        ByteOrderMark: The detected kind, ``ByteOrderMark.NONE`` if absent.
    """
    if len(text) >= 2:
        head: str = text[:2]
        if head in (UTF16_LE_BOM, UTF16_BE_BOM):
            return ByteOrderMark.UTF16
        if len(text) >= 3 and text[:3] == UTF8_BOM:
            return ByteOrderMark.UTF8
    return ByteOrderMark.NONE


def get_byte_order_mark_length(text: str) -> int:
    """Return the length of the leading byte-order mark: 0, 2 or 3."""
    return int(detect_byte_order_mark(text))


def get_byte_order_mark(text: str) -> str:
    """Return the leading byte-order mark of ``text``, or ``""`` if there is none."""
    length: int = get_byte_order_mark_length(text)
    return text[:length] if length > 0 else ""


def remove_byte_order_mark(text: str) -> str:
    """Return ``text`` without its leading byte-order mark.

    Args:
        text (str): Text whose code units mirror the raw bytes.

    Returns:
        str: The stripped text, or ``text`` itself when no BOM is present.
    """
    length: int = get_byte_order_mark_length(text)
    return text[length:] if length else text


def add_utf8_byte_order_mark(text: str) -> str:
    """Prepend a UTF-8 byte-order mark unless ``text`` already starts with a BOM.

    An existing UTF-16 BOM is left in place; it is never converted or doubled.

    Args:
        text (str): Text whose code units mirror the raw bytes.

    Returns:
        str: ``text`` with a leading UTF-8 BOM.
    """
    if get_byte_order_mark_length(text) == 0:
        return UTF8_BOM + text
    return text
