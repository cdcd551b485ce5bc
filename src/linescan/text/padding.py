# topmark:header:start
#
#   project      : LineScan
#   file         : padding.py
#   file_relpath : src/linescan/text/padding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-width padding helpers.

``ch`` is added as a whole token until the result is at least ``size`` long, so a
multi-character fill may overshoot ``size``.
"""

from __future__ import annotations


def pad_left(text: str, size: int, ch: str = " ") -> str:
    """Prepend ``ch`` to ``text`` until it is at least ``size`` long.

    Args:
        text (str): The text to pad.
        size (int): The minimum width; non-positive values are a no-op.
        ch (str): The fill token. An empty token leaves ``text`` unchanged.

    Returns:
        str: The padded text.
    """
    if not ch:
        return text
    while len(text) < size:
        text = ch + text
    return text


def pad_right(text: str, size: int, ch: str = " ") -> str:
    """Append ``ch`` to ``text`` until it is at least ``size`` long.

    Args:
        text (str): The text to pad.
        size (int): The minimum width; non-positive values are a no-op.
        ch (str): The fill token. An empty token leaves ``text`` unchanged.

    Returns:
        str: The padded text.
    """
    if not ch:
        return text
    while len(text) < size:
        text += ch
    return text
