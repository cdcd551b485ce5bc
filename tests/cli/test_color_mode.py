# topmark:header:start
#
#   project      : LineScan
#   file         : test_color_mode.py
#   file_relpath : tests/cli/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color resolution from CLI options, environment and TTY."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linescan.cli.options import ColorMode, resolve_color_mode
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from click.testing import Result


@mark_cli
@parametrize(
    "mode, force, no_color, isatty, expected",
    [
        (ColorMode.ALWAYS, None, "1", False, True),
        (ColorMode.NEVER, "1", None, True, False),
        (ColorMode.AUTO, "1", "1", False, True),
        (ColorMode.AUTO, "0", None, True, True),
        (ColorMode.AUTO, None, "1", True, False),
        (ColorMode.AUTO, None, None, True, True),
        (ColorMode.AUTO, None, None, False, False),
        (None, None, None, False, False),
    ],
)
def test_resolve_color_mode(
    monkeypatch: pytest.MonkeyPatch,
    mode: ColorMode | None,
    force: str | None,
    no_color: str | None,
    isatty: bool,
    expected: bool,
) -> None:
    """Explicit modes win, then FORCE_COLOR, then NO_COLOR, then the TTY."""
    for name, value in (("FORCE_COLOR", force), ("NO_COLOR", no_color)):
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    assert resolve_color_mode(cli_mode=mode, stdout_isatty=isatty) is expected


@mark_cli
def test_json_output_has_no_ansi_even_with_forced_color(isolation: Path) -> None:
    """Machine formats stay plain when color is forced on."""
    result: Result = run_cli(["--color", "always", "version", "--format", "json"])

    assert_SUCCESS(result)
    assert "\x1b[" not in result.stdout
