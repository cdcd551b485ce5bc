# topmark:header:start
#
#   project      : LineScan
#   file         : __main__.py
#   file_relpath : src/linescan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LineScan via ``python -m linescan``.

Delegates to [`linescan.cli.main.cli`][], the same entry point as the
``linescan`` console script.

Examples:
    Print the line starts of a file::

        python -m linescan starts README.md
"""

from __future__ import annotations

from linescan.cli.main import cli

if __name__ == "__main__":
    cli()
