# topmark:header:start
#
#   project      : LineScan
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: input and decoding failures map to sysexits-style exit codes."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from linescan.core.exit_codes import ExitCode
from tests.cli.conftest import assert_EXIT, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_missing_file(isolation: Path) -> None:
    """A missing input exits with FILE_NOT_FOUND."""
    result: Result = run_cli(["lines", "missing.txt"])
    assert_EXIT(result, ExitCode.FILE_NOT_FOUND)
    assert "linescan: missing.txt: no such file" in result.stderr


@mark_cli
def test_directory_input(isolation: Path) -> None:
    """A directory given as input exits with IO_ERROR."""
    (isolation / "sub").mkdir()
    result: Result = run_cli(["starts", "sub"])
    assert_EXIT(result, ExitCode.IO_ERROR)


@mark_cli
@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="file permissions are not enforced",
)
def test_unreadable_file(isolation: Path) -> None:
    """An unreadable input exits with PERMISSION_DENIED."""
    locked: Path = isolation / "locked.txt"
    locked.write_bytes(b"x")
    locked.chmod(0)
    try:
        result: Result = run_cli(["lines", "locked.txt"])
    finally:
        locked.chmod(0o644)
    assert_EXIT(result, ExitCode.PERMISSION_DENIED)


@mark_cli
def test_undecodable_input(isolation: Path) -> None:
    """Invalid bytes under the strict handler exit with ENCODING_ERROR."""
    result: Result = run_cli(["lines"], input_data=b"ok\n\xff\n")
    assert_EXIT(result, ExitCode.ENCODING_ERROR)


@mark_cli
def test_undecodable_input_with_replace(isolation: Path) -> None:
    """A lenient error handler decodes invalid bytes instead of failing."""
    result: Result = run_cli(["lines", "--errors", "replace"], input_data=b"ok\n\xff")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout == "ok\n\ufffd\n"


@mark_cli
def test_unknown_encoding(isolation: Path) -> None:
    """An unknown codec name is a usage error."""
    result: Result = run_cli(["lines", "--encoding", "no-such-codec"], input_data=b"x")
    assert_USAGE_ERROR(result)


@mark_cli
def test_stdin_twice(isolation: Path) -> None:
    """STDIN may be named only once."""
    result: Result = run_cli(["lines", "-", "-"], input_data=b"x")
    assert_USAGE_ERROR(result)
