# topmark:header:start
#
#   project      : LineScan
#   file         : emitters.py
#   file_relpath : src/linescan/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render per-input reports in the selected output format.

Commands build small report records (one per input) and hand them to an
``emit_*`` function together with an [`OutputFormat`][linescan.core.formats.OutputFormat]:

- ``TEXT``: human-oriented, optionally colored; a ``==> name <==`` banner
  separates inputs when there is more than one (or when asked to).
- ``MARKDOWN``: one section per input.
- ``JSON``: a single document ``{"inputs": [...]}``.
- ``NDJSON``: one JSON object per input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from linescan.core.formats import OutputFormat
from linescan.text.padding import pad_left, pad_right

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linescan.cli.console import ConsoleLike
    from linescan.text.bom import ByteOrderMark


@dataclass(frozen=True)
class LinesReport:
    """Lines of one input.

    Attributes:
        name (str): Input display name.
        lines (tuple[tuple[int, str], ...]): ``(line_number, text)`` pairs, 1-based.
    """

    name: str
    lines: tuple[tuple[int, str], ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the machine-output shape of this report."""
        return {
            "name": self.name,
            "lines": [text for _, text in self.lines],
            "line_numbers": [number for number, _ in self.lines],
        }


@dataclass(frozen=True)
class StartsReport:
    """Line starts of one input.

    Attributes:
        name (str): Input display name.
        line_starts (tuple[int, ...]): Offset of each line.
        unit (str): ``"codepoint"`` or ``"utf16"``.
    """

    name: str
    line_starts: tuple[int, ...]
    unit: str

    def to_dict(self) -> dict[str, Any]:
        """Return the machine-output shape of this report."""
        return {"name": self.name, "unit": self.unit, "line_starts": list(self.line_starts)}


@dataclass(frozen=True)
class BomReport:
    """Byte-order mark of one input.

    Attributes:
        name (str): Input display name.
        kind (ByteOrderMark): The detected mark.
        mark (str): The mark's code units (empty when absent).
    """

    name: str
    kind: ByteOrderMark
    mark: str

    @property
    def mark_hex(self) -> str:
        """The mark as space-separated hex bytes, e.g. ``EF BB BF``."""
        return " ".join(f"{ord(ch):02X}" for ch in self.mark)

    def to_dict(self) -> dict[str, Any]:
        """Return the machine-output shape of this report."""
        return {
            "name": self.name,
            "bom": self.kind.name.lower(),
            "length": int(self.kind),
            "bytes": self.mark_hex,
        }


def _emit_machine(
    console: ConsoleLike,
    fmt: OutputFormat,
    payloads: Sequence[dict[str, Any]],
) -> None:
    if fmt == OutputFormat.NDJSON:
        for payload in payloads:
            console.print(json.dumps(payload, ensure_ascii=False))
    else:
        console.print(json.dumps({"inputs": list(payloads)}, indent=2, ensure_ascii=False))


def _banner(console: ConsoleLike, name: str) -> None:
    console.print(console.styled(f"==> {name} <==", bold=True))


def emit_lines(
    console: ConsoleLike,
    reports: Sequence[LinesReport],
    fmt: OutputFormat,
    *,
    number: bool = False,
    gutter_fill: str = " ",
    banners: bool = False,
) -> None:
    """Render line reports.

    Args:
        console (ConsoleLike): Program-output console.
        reports (Sequence[LinesReport]): One report per input.
        fmt (OutputFormat): Output format.
        number (bool): Prefix each text/markdown line with its line number.
        gutter_fill (str): Fill token for the line-number gutter.
        banners (bool): Force a banner per input even for a single input (text only).
    """
    if fmt.is_machine:
        _emit_machine(console, fmt, [r.to_dict() for r in reports])
        return

    for index, report in enumerate(reports):
        width: int = len(str(report.lines[-1][0])) if report.lines else 1
        if fmt == OutputFormat.MARKDOWN:
            if index:
                console.print()
            console.print(f"## {report.name}")
            console.print()
            console.print("```text")
        elif banners or len(reports) > 1:
            if index:
                console.print()
            _banner(console, report.name)

        for line_number, text in report.lines:
            if number:
                gutter: str = pad_left(str(line_number), width, gutter_fill)
                prefix: str = console.styled(f"{gutter} | ", dim=True)
                console.print(f"{prefix}{text}")
            else:
                console.print(text)

        if fmt == OutputFormat.MARKDOWN:
            console.print("```")


def emit_starts(
    console: ConsoleLike,
    reports: Sequence[StartsReport],
    fmt: OutputFormat,
    *,
    banners: bool = False,
) -> None:
    """Render line-start reports.

    Text output prints one offset per line; markdown renders a table of
    ``line | start``.

    Args:
        console (ConsoleLike): Program-output console.
        reports (Sequence[StartsReport]): One report per input.
        fmt (OutputFormat): Output format.
        banners (bool): Force a banner per input even for a single input (text only).
    """
    if fmt.is_machine:
        _emit_machine(console, fmt, [r.to_dict() for r in reports])
        return

    for index, report in enumerate(reports):
        if fmt == OutputFormat.MARKDOWN:
            if index:
                console.print()
            console.print(f"## {report.name} ({report.unit})")
            console.print()
            console.print("| line | start |")
            console.print("| ---: | ----: |")
            for line, start in enumerate(report.line_starts, start=1):
                console.print(f"| {line} | {start} |")
            continue

        if banners or len(reports) > 1:
            if index:
                console.print()
            _banner(console, report.name)
        for start in report.line_starts:
            console.print(str(start))


def emit_bom(
    console: ConsoleLike,
    reports: Sequence[BomReport],
    fmt: OutputFormat,
) -> None:
    """Render byte-order-mark reports, one row per input.

    Args:
        console (ConsoleLike): Program-output console.
        reports (Sequence[BomReport]): One report per input.
        fmt (OutputFormat): Output format.
    """
    if fmt.is_machine:
        _emit_machine(console, fmt, [r.to_dict() for r in reports])
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("| input | bom | length | bytes |")
        console.print("| :---- | :-- | -----: | :---- |")
        for r in reports:
            console.print(f"| {r.name} | {r.kind.name.lower()} | {int(r.kind)} | {r.mark_hex} |")
        return

    name_width: int = max((len(r.name) for r in reports), default=0)
    for r in reports:
        kind: str = pad_right(r.kind.name.lower(), 5)
        styled_kind: str = console.styled(kind, fg="green" if r.kind else None)
        detail: str = f"  {r.mark_hex}" if r.mark else ""
        console.print(f"{pad_right(r.name, name_width)}  {styled_kind}{detail}".rstrip())
