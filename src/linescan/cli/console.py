# topmark:header:start
#
#   project      : LineScan
#   file         : console.py
#   file_relpath : src/linescan/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for LineScan commands.

Scan results go to stdout and config notices to stderr, both through
[`ClickConsole`][linescan.cli.console.ClickConsole]. Diagnostics use `logging`
instead and never pass through here.

Decoding with ``--errors surrogateescape`` leaves lone surrogates in the text,
which no output stream can encode. The console writes each one as a
``\\uXXXX`` escape. Inside JSON output that escape is itself a valid JSON
string escape, so machine consumers get the original code unit back.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


def escape_surrogates(text: str) -> str:
    """Replace lone surrogates in ``text`` with ``\\uXXXX`` escapes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class ConsoleLike(Protocol):
    """What commands and emitters need from a console."""

    def print(self, text: str = "") -> None:
        """Write one line of program output."""
        ...

    def warn(self, text: str) -> None:
        """Write one notice line to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with ANSI styling, or unchanged when color is off."""
        ...


class ClickConsole:
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styling.
        out (TextIO | None): Program output stream; `sys.stdout` when omitted.
        err (TextIO | None): Notice stream; `sys.stderr` when omitted.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "") -> None:
        """Write one line of program output."""
        click.echo(escape_surrogates(text), file=self.out, color=self.enable_color)

    def warn(self, text: str) -> None:
        """Write one notice line to stderr, yellow when color is on."""
        line: str = self.styled(escape_surrogates(text), fg="yellow")
        click.echo(line, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        return click.style(text, **style_kwargs) if self.enable_color else text
