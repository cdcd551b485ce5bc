# topmark:header:start
#
#   project      : LineScan
#   file         : __init__.py
#   file_relpath : src/linescan/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for LineScan.

The CLI is the I/O front end of the library: it reads files or STDIN, decodes
them, and renders the results of [`linescan.text`][] in text, Markdown, JSON or
NDJSON. The console script entry point is [`linescan.cli.main.cli`][].
"""

from __future__ import annotations
