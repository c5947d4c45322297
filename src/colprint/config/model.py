# topmark:header:start
#
#   project      : ColPrint
#   file         : model.py
#   file_relpath : src/colprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting configuration model.

`FormatConfig` is an immutable snapshot of every formatter setting. It is built
from runtime defaults, a TOML table (``colprint.toml`` or ``[tool.colprint]`` in
``pyproject.toml``) and CLI overrides, in that order of precedence, and is
applied with [`Formatter.from_config`][colprint.core.formatter.Formatter.from_config].

TOML keys:

| Key               | Type    | Example        |
|-------------------|---------|----------------|
| `separator`       | string  | `" \\| "`       |
| `line_terminator` | string  | `"\\n"`         |
| `width`           | integer | `8`            |
| `alignment`       | string  | `"right"`      |
| `precision`       | integer | `3`            |
| `float_mode`      | string  | `"fixed"`      |
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from colprint.config.keys import Toml
from colprint.config.logging import get_logger
from colprint.constants import DEFAULT_LINE_TERMINATOR, DEFAULT_SEPARATOR, DEFAULT_WIDTH
from colprint.core.enums import Alignment, FloatMode, KeyedStrEnum
from colprint.core.errors import ConfigError, InvalidSettingError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from colprint.config.logging import ColprintLogger
    from colprint.config.types import TomlTable

logger: ColprintLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatter configuration.

    Attributes:
        separator (str): Text between values of one line.
        line_terminator (str): Text after each line.
        width (int): Minimum field width (non-negative).
        alignment (Alignment): Padding distribution.
        precision (int | None): Float precision; ``None`` keeps the sink default.
        float_mode (FloatMode): Floating-point notation.
    """

    separator: str = DEFAULT_SEPARATOR
    line_terminator: str = DEFAULT_LINE_TERMINATOR
    width: int = DEFAULT_WIDTH
    alignment: Alignment = Alignment.LEFT
    precision: int | None = None
    float_mode: FloatMode = FloatMode.DEFAULT

    def __post_init__(self) -> None:
        if self.width < 0:
            raise InvalidSettingError(f"Field width must be non-negative, got {self.width}")
        if self.precision is not None and self.precision < 0:
            raise InvalidSettingError(f"Precision must be non-negative, got {self.precision}")

    @classmethod
    def from_defaults(cls) -> FormatConfig:
        """Return the runtime default configuration."""
        return cls()

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any], *, source: str = "<mapping>") -> FormatConfig:
        """Build a configuration from a TOML-like table.

        Keys missing from ``table`` take their defaults. Unknown keys are logged
        and ignored.

        Args:
            table (Mapping[str, Any]): Parsed TOML table (e.g. ``[tool.colprint]``).
            source (str): Human-readable origin, used in error messages.

        Returns:
            FormatConfig: The validated configuration.

        Raises:
            ConfigError: If a value has the wrong type.
            InvalidSettingError: If a value is out of range or names no enum member.
        """
        return cls.from_defaults().merged_from_mapping(table, source=source)

    def merged_from_mapping(
        self, table: Mapping[str, Any], *, source: str = "<mapping>"
    ) -> FormatConfig:
        """Return a copy with the settings found in ``table`` applied on top.

        See `from_mapping` for the accepted keys and raised errors.
        """
        known: set[str] = {f.name for f in fields(self)}
        for key in table:
            if key not in known:
                logger.warning("%s: ignoring unknown config key '%s'", source, key)

        overrides: dict[str, Any] = {}
        for key in (Toml.KEY_SEPARATOR, Toml.KEY_LINE_TERMINATOR):
            if key in table:
                overrides[key] = _expect(table[key], str, key, source)
        for key in (Toml.KEY_WIDTH, Toml.KEY_PRECISION):
            if key in table:
                overrides[key] = _expect(table[key], int, key, source)
        if Toml.KEY_ALIGNMENT in table:
            overrides[Toml.KEY_ALIGNMENT] = _parse_enum(
                Alignment, table[Toml.KEY_ALIGNMENT], Toml.KEY_ALIGNMENT, source
            )
        if Toml.KEY_FLOAT_MODE in table:
            overrides[Toml.KEY_FLOAT_MODE] = _parse_enum(
                FloatMode, table[Toml.KEY_FLOAT_MODE], Toml.KEY_FLOAT_MODE, source
            )
        logger.debug("%s: applying %d setting(s)", source, len(overrides))
        return replace(self, **overrides)

    def merged(self, **overrides: Any) -> FormatConfig:
        """Return a copy with every non-``None`` override applied.

        Example:
            ```python
            cfg = FormatConfig().merged(width=4, precision=None)
            assert cfg.width == 4 and cfg.precision is None
            ```
        """
        applied: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **applied)

    def to_dict(self) -> TomlTable:
        """Return a TOML-compatible table; ``precision`` is omitted while unset."""
        table: TomlTable = {
            Toml.KEY_SEPARATOR: self.separator,
            Toml.KEY_LINE_TERMINATOR: self.line_terminator,
            Toml.KEY_WIDTH: self.width,
            Toml.KEY_ALIGNMENT: self.alignment.key,
            Toml.KEY_FLOAT_MODE: self.float_mode.key,
        }
        if self.precision is not None:
            table[Toml.KEY_PRECISION] = self.precision
        return table


def _expect(value: Any, kind: type, key: str, source: str) -> Any:
    # bool is an int subclass but never a valid width or precision
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ConfigError(
            f"{source}: '{key}' must be of type {kind.__name__}, got {type(value).__name__}"
        )
    return kind(value)


def _parse_enum(enum_cls: type[KeyedStrEnum], value: Any, key: str, source: str) -> Any:
    if not isinstance(value, str):
        raise ConfigError(f"{source}: '{key}' must be a string, got {type(value).__name__}")
    member = enum_cls.parse(value)
    if member is None:
        raise InvalidSettingError(
            f"{source}: invalid {key} '{value}'. Must be one of: {', '.join(enum_cls.keys())}"
        )
    return member
