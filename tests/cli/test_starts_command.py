# topmark:header:start
#
#   project      : LineScan
#   file         : test_starts_command.py
#   file_relpath : tests/cli/test_starts_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `starts` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_starts_text(isolation: Path) -> None:
    """One offset per line, CRLF counted as one break."""
    result: Result = run_cli(["starts"], input_data=b"a\r\nb\n")

    assert_SUCCESS(result)
    assert result.stdout == "0\n3\n5\n"


@mark_cli
def test_starts_utf16(isolation: Path) -> None:
    """--utf16 reports UTF-16 code-unit offsets."""
    data: bytes = "\U0001f600\nx".encode()
    plain: Result = run_cli(["starts", "--format", "json"], input_data=data)
    utf16: Result = run_cli(["starts", "--utf16", "--format", "json"], input_data=data)

    assert_SUCCESS(plain)
    assert_SUCCESS(utf16)
    assert json.loads(plain.stdout)["inputs"][0] == {
        "name": "<stdin>",
        "unit": "codepoint",
        "line_starts": [0, 2],
    }
    assert json.loads(utf16.stdout)["inputs"][0]["line_starts"] == [0, 3]


@mark_cli
def test_starts_markdown_table(isolation: Path) -> None:
    """Markdown renders a line/start table."""
    result: Result = run_cli(["starts", "--format", "markdown"], input_data=b"ab\ncd")

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "## <stdin> (codepoint)",
        "",
        "| line | start |",
        "| ---: | ----: |",
        "| 1 | 0 |",
        "| 2 | 3 |",
    ]


@mark_cli
def test_starts_verbose_forces_banner(isolation: Path) -> None:
    """With -v a single input still gets a banner."""
    result: Result = run_cli(["--no-color", "-v", "starts"], input_data=b"")

    assert_SUCCESS(result)
    assert result.stdout == "==> <stdin> <==\n0\n"
