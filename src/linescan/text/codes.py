# topmark:header:start
#
#   project      : LineScan
#   file         : codes.py
#   file_relpath : src/linescan/text/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Code-unit classification tables used by the line scanner.

Every code unit of a text falls in exactly one [`CharClass`][linescan.text.codes.CharClass]:
a line terminator, inter-line whitespace, or content. The tables are keyed by the
numeric code-unit value (``ord(ch)``) so the scanner does a single dict lookup per
code unit.

Notes:
    - CR is listed as a plain terminator; the scanner itself folds a following LF
      into the same line break.
    - U+0085 (NEL) is treated as whitespace, not as a line terminator.
    - U+FEFF is whitespace here; it is *not* a byte-order mark for the
      [`linescan.text.bom`][] helpers, which inspect raw byte values.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class CharClass(Enum):
    """Classification of a single code unit.

    Attributes:
        TERMINATOR: Ends the current line (CR, LF, LS, PS).
        WHITESPACE: Neither ends a line nor counts as line content.
        CONTENT: Any other code unit, including unpaired surrogates.
    """

    TERMINATOR = "terminator"
    WHITESPACE = "whitespace"
    CONTENT = "content"


CR: Final[int] = 0x000D
LF: Final[int] = 0x000A
LS: Final[int] = 0x2028
PS: Final[int] = 0x2029

LINE_TERMINATORS: Final[frozenset[int]] = frozenset({CR, LF, LS, PS})

WHITESPACE: Final[frozenset[int]] = frozenset(
    {
        0x0009,  # <TAB> tab
        0x000B,  # <VT> vertical tab
        0x000C,  # <FF> form feed
        0x0020,  # <SP> space
        0x00A0,  # <NBSP> no-break space
        0xFEFF,  # <ZWNBSP> zero width no-break space
        0x1680,  # ogham space mark
        *range(0x2000, 0x200B),  # en quad .. hair space
        0x202F,  # narrow no-break space
        0x205F,  # medium mathematical space
        0x3000,  # ideographic space
        0x0085,  # <NEL> next line
    }
)

CHAR_CLASSES: Final[dict[int, CharClass]] = {
    **{code: CharClass.TERMINATOR for code in LINE_TERMINATORS},
    **{code: CharClass.WHITESPACE for code in WHITESPACE},
}


def classify(code: int) -> CharClass:
    """Return the class of a numeric code-unit value.

    Args:
        code (int): The code-unit value, typically ``ord(ch)``.

    Returns:
        CharClass: The class of ``code``; anything unlisted is content.
    """
    return CHAR_CLASSES.get(code, CharClass.CONTENT)


def is_line_terminator(ch: str) -> bool:
    """Return True if the single character ``ch`` is a line terminator."""
    return ord(ch) in LINE_TERMINATORS


def is_whitespace(ch: str) -> bool:
    """Return True if the single character ``ch`` is recognized whitespace."""
    return ord(ch) in WHITESPACE


def has_content(text: str) -> bool:
    """Return True if ``text`` holds at least one content code unit.

    This is the filter the scanner applies when empty lines are removed.
    """
    return any(ord(ch) not in CHAR_CLASSES for ch in text)
