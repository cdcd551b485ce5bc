# topmark:header:start
#
#   project      : LineScan
#   file         : model.py
#   file_relpath : src/linescan/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime config and its mutable builder.

[`MutableConfig`][linescan.config.model.MutableConfig] collects configuration
layer by layer (defaults, ``pyproject.toml``, ``linescan.toml``, explicit
``--config`` files, CLI options) with last-wins merging of tri-state fields, then
produces an immutable [`Config`][linescan.config.model.Config] via
[`freeze`][linescan.config.model.MutableConfig.freeze].

Malformed values never abort loading: they are logged, recorded in
``warnings``, and the lower-precedence value stays in effect.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from linescan.config.io import (
    extract_pyproject_section,
    get_bool_value_or_none,
    get_enum_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from linescan.config.io.types import TomlTable
from linescan.config.keys import Toml
from linescan.config.logging import LinescanLogger, get_logger
from linescan.constants import LINESCAN_TOML_NAME, PYPROJECT_TOML_NAME
from linescan.core.formats import OutputFormat

# Generic mapping accepted for overrides (CLI namespaces and plain dicts alike)
ArgsLike = Mapping[str, Any]

logger: LinescanLogger = get_logger(__name__)


def _is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _is_known_error_handler(name: str) -> bool:
    try:
        codecs.lookup_error(name)
    except LookupError:
        return False
    return True


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        encoding (str): Codec used to decode input files for line scanning.
        errors (str): Codec error handler (``strict``, ``replace``, ``surrogateescape``...).
        remove_empty (bool): Drop empty and whitespace-only lines from line output.
        number (bool): Prefix printed lines with a padded line-number gutter.
        gutter_fill (str): Fill token used to pad line numbers.
        output_format (OutputFormat): Default output format.
        config_files (tuple[Path | str, ...]): Config sources merged, in order.
        warnings (tuple[str, ...]): Problems found while loading config.
    """

    encoding: str
    errors: str
    remove_empty: bool
    number: bool
    gutter_fill: str
    output_format: OutputFormat
    config_files: tuple[Path | str, ...] = ()
    warnings: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            encoding=self.encoding,
            errors=self.errors,
            remove_empty=self.remove_empty,
            number=self.number,
            gutter_fill=self.gutter_fill,
            output_format=self.output_format,
            config_files=list(self.config_files),
            warnings=list(self.warnings),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this config in the TOML schema (provenance and warnings excluded)."""
        return {
            Toml.SECTION_INPUT: {
                Toml.KEY_ENCODING: self.encoding,
                Toml.KEY_ERRORS: self.errors,
            },
            Toml.SECTION_LINES: {
                Toml.KEY_REMOVE_EMPTY: self.remove_empty,
                Toml.KEY_NUMBER: self.number,
                Toml.KEY_GUTTER_FILL: self.gutter_fill,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_FORMAT: self.output_format.value,
            },
        }

    def to_toml(self) -> str:
        """Render this config as a TOML document."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    All settings are tri-state: ``None`` means "not set by this layer".

    Attributes:
        encoding (str | None): Input codec, from ``[input]``.
        errors (str | None): Input codec error handler, from ``[input]``.
        remove_empty (bool | None): From ``[lines]``.
        number (bool | None): From ``[lines]``.
        gutter_fill (str | None): From ``[lines]``.
        output_format (OutputFormat | None): From ``[output]``.
        config_files (list[Path | str]): Config sources merged so far.
        warnings (list[str]): Problems found while loading config.
    """

    encoding: str | None = None
    errors: str | None = None
    remove_empty: bool | None = None
    number: bool | None = None
    gutter_fill: str | None = None
    output_format: OutputFormat | None = None

    config_files: list[Path | str] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config, filling unset values from defaults."""
        defaults: MutableConfig = MutableConfig.from_defaults()
        resolved: MutableConfig = defaults.merge_with(self)

        # Defaults always set every field; the fallbacks only satisfy type checkers.
        return Config(
            encoding=resolved.encoding or "utf-8",
            errors=resolved.errors or "strict",
            remove_empty=bool(resolved.remove_empty),
            number=bool(resolved.number),
            gutter_fill=resolved.gutter_fill or " ",
            output_format=resolved.output_format or OutputFormat.TEXT,
            config_files=tuple(self.config_files),
            warnings=tuple(self.warnings),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed LineScan table (already extracted from
                ``[tool.linescan]`` for ``pyproject.toml``).
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The resulting draft.
        """
        warnings: list[str] = []

        input_tbl: TomlTable = get_table_value(data, Toml.SECTION_INPUT)
        logger.trace("TOML [input]: %s", input_tbl)
        lines_tbl: TomlTable = get_table_value(data, Toml.SECTION_LINES)
        logger.trace("TOML [lines]: %s", lines_tbl)
        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output]: %s", output_tbl)

        where_input: str = f"[{Toml.SECTION_INPUT}]"
        encoding: str | None = get_string_value_or_none(
            input_tbl, Toml.KEY_ENCODING, where=where_input, warnings=warnings
        )
        if encoding is not None and not _is_known_encoding(encoding):
            msg: str = f"Unknown encoding in {where_input}.{Toml.KEY_ENCODING}: {encoding!r}"
            logger.warning("%s", msg)
            warnings.append(msg)
            encoding = None

        errors: str | None = get_string_value_or_none(
            input_tbl, Toml.KEY_ERRORS, where=where_input, warnings=warnings
        )
        if errors is not None and not _is_known_error_handler(errors):
            msg = f"Unknown error handler in {where_input}.{Toml.KEY_ERRORS}: {errors!r}"
            logger.warning("%s", msg)
            warnings.append(msg)
            errors = None

        where_lines: str = f"[{Toml.SECTION_LINES}]"
        gutter_fill: str | None = get_string_value_or_none(
            lines_tbl, Toml.KEY_GUTTER_FILL, where=where_lines, warnings=warnings
        )
        if gutter_fill == "":
            msg = f"Empty {where_lines}.{Toml.KEY_GUTTER_FILL} ignored"
            logger.warning("%s", msg)
            warnings.append(msg)
            gutter_fill = None

        draft = cls(
            encoding=encoding,
            errors=errors,
            remove_empty=get_bool_value_or_none(
                lines_tbl, Toml.KEY_REMOVE_EMPTY, where=where_lines, warnings=warnings
            ),
            number=get_bool_value_or_none(
                lines_tbl, Toml.KEY_NUMBER, where=where_lines, warnings=warnings
            ),
            gutter_fill=gutter_fill,
            output_format=get_enum_value_or_none(
                output_tbl,
                Toml.KEY_FORMAT,
                OutputFormat,
                where=f"[{Toml.SECTION_OUTPUT}]",
                warnings=warnings,
            ),
            config_files=[config_file] if config_file is not None else [],
            warnings=[f"{config_file}: {w}" for w in warnings] if config_file else warnings,
        )
        logger.debug("Draft config from %s: %s", config_file or "<defaults>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.linescan]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or ``None`` if the file could not be
                read or parsed, or a ``pyproject.toml`` has no ``[tool.linescan]``.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable | None = load_toml_dict(path)
        if toml_data is None:
            return None

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable | None = extract_pyproject_section(toml_data)
            if tool_section is None:
                logger.debug("No [tool.linescan] section in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        project_dir: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Merge order (lowest to highest precedence):
            1) Built-in defaults
            2) ``pyproject.toml`` ``[tool.linescan]`` in ``project_dir``
            3) ``linescan.toml`` in ``project_dir``
            4) Extra config files passed explicitly (in the order provided)

        Unreadable extra files are skipped here; callers that require them to load
        should call [`from_toml_file`][linescan.config.model.MutableConfig.from_toml_file]
        first.

        Args:
            project_dir (Path | None): Directory to discover config files in;
                defaults to the current working directory.
            extra_config_files (Iterable[Path] | None): Explicit config files.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            base: Path = project_dir or Path.cwd()
            for name in (PYPROJECT_TOML_NAME, LINESCAN_TOML_NAME):
                candidate: Path = base / name
                if not candidate.is_file():
                    continue
                layer: MutableConfig | None = cls.from_toml_file(candidate)
                if layer is not None:
                    logger.info("Using config: %s", candidate)
                    draft = draft.merge_with(layer)

        for extra in extra_config_files or ():
            layer = cls.from_toml_file(Path(extra))
            if layer is not None:
                logger.info("Using config: %s", extra)
                draft = draft.merge_with(layer)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new draft representing the merged result.
        """
        return MutableConfig(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            errors=other.errors if other.errors is not None else self.errors,
            remove_empty=other.remove_empty
            if other.remove_empty is not None
            else self.remove_empty,
            number=other.number if other.number is not None else self.number,
            gutter_fill=other.gutter_fill if other.gutter_fill is not None else self.gutter_fill,
            output_format=other.output_format
            if other.output_format is not None
            else self.output_format,
            config_files=self.config_files + other.config_files,
            warnings=self.warnings + other.warnings,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI or API overrides in place; ``None`` values are ignored.

        Recognized keys match the attribute names of this class.

        Args:
            args (ArgsLike): Override values keyed by attribute name.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key in ("encoding", "errors", "remove_empty", "number", "gutter_fill"):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, value)
        fmt: Any = args.get("output_format")
        if fmt is not None:
            self.output_format = OutputFormat(fmt)
        return self
