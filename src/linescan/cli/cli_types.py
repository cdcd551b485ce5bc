# topmark:header:start
#
#   project      : LineScan
#   file         : cli_types.py
#   file_relpath : src/linescan/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for the LineScan CLI."""

from __future__ import annotations

from enum import Enum
from typing import Any

import click


class EnumChoiceParam(click.Choice):
    """Case-insensitive choice over an enum's values, converted to the member.

    ``--format JSON`` and ``--format json`` both yield ``OutputFormat.JSON``; help
    output lists the lowercase values.

    Args:
        enum_cls (type[Enum]): A ``str``-valued enum.
    """

    def __init__(self, enum_cls: type[Enum]) -> None:
        self.enum_cls: type[Enum] = enum_cls
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Enum:
        """Return the enum member named by ``value`` (members pass through)."""
        if isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(super().convert(value, param, ctx))
