# topmark:header:start
#
#   project      : LineScan
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LineScan through Click's test runner.

Tests that depend on config discovery or on relative input paths should request
the ``isolation`` fixture so the command runs in an empty temporary directory.

Assertions on program output use ``result.stdout``: log records and error
messages go to stderr and are kept out of it.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from linescan.cli.main import cli
from linescan.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["lines", "-"]``.
        input_data (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command. Pass ``bytes`` to control the exact encoding.
        env (dict[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["lines"], input_data=b"a\\nb")
        assert result.stdout == "a\\nb\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_data, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_EXIT(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
