# topmark:header:start
#
#   project      : ColPrint
#   file         : io.py
#   file_relpath : src/colprint/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render ColPrint TOML configuration.

Sources, from lowest to highest precedence:

1. runtime defaults (`load_defaults_dict`, no I/O);
2. one config file: an explicit path, or the first ``colprint.toml`` /
   ``pyproject.toml`` with a ``[tool.colprint]`` table found by walking up from
   the working directory (`discover_config`);
3. CLI overrides, applied by the caller with `FormatConfig.merged`.

Parsing and rendering use `tomlkit`.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from colprint.config.keys import Toml
from colprint.config.logging import get_logger
from colprint.config.model import FormatConfig
from colprint.constants import (
    COLPRINT_TOML_NAME,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOML_NAME,
    TOPMARK_END_MARKER,
)
from colprint.core.errors import ConfigError

if TYPE_CHECKING:
    from colprint.config.logging import ColprintLogger
    from colprint.config.types import TomlTable

logger: ColprintLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ColPrint's runtime defaults as a new TOML-compatible dict."""
    return FormatConfig.from_defaults().to_dict()


def to_toml(table: TomlTable) -> str:
    """Serialize a TOML mapping to a string, omitting ``None`` values.

    Args:
        table (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: dict[str, Any] = {k: v for k, v in table.items() if v is not None}
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


def load_default_template_text() -> str:
    """Return the packaged annotated default configuration.

    The leading file header block is stripped. If the packaged resource cannot
    be read, the runtime defaults are rendered instead and a warning is logged.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {TOPMARK_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def _is_pyproject(path: Path) -> bool:
    return path.name == PYPROJECT_TOML_NAME


def _tool_table(doc: TomlTable) -> TomlTable | None:
    tool: Any = doc.get(Toml.SECTION_TOOL)
    if not isinstance(tool, Mapping):
        return None
    table: Any = cast("Mapping[str, Any]", tool).get(Toml.SECTION_COLPRINT)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def parse_toml_text(text: str, *, source: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load the ColPrint table of a TOML file.

    For ``pyproject.toml`` the ``[tool.colprint]`` table is returned (empty when
    absent); any other file is used as a whole.

    Args:
        path (Path): Path to ``colprint.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable: The ColPrint settings table.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    doc: TomlTable = parse_toml_text(text, source=str(path))
    if _is_pyproject(path):
        return _tool_table(doc) or {}
    return doc


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory ``colprint.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.colprint]`` table.

    Args:
        start (Path): Directory where the search starts.

    Returns:
        Path | None: The config file found, or ``None``.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / COLPRINT_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                doc: TomlTable = parse_toml_text(
                    pyproject.read_text(encoding="utf-8"), source=str(pyproject)
                )
            except (OSError, ConfigError) as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if _tool_table(doc) is not None:
                logger.debug("Discovered [tool.colprint] in %s", pyproject)
                return pyproject
    return None


def resolve_config(
    *,
    config_path: Path | None = None,
    no_config: bool = False,
    start: Path | None = None,
) -> tuple[FormatConfig, Path | None]:
    """Resolve the effective configuration from defaults and one config file.

    Args:
        config_path (Path | None): Explicit config file; disables discovery.
        no_config (bool): Ignore config files entirely (explicit path included).
        start (Path | None): Discovery start directory; defaults to the CWD.

    Returns:
        tuple[FormatConfig, Path | None]: The configuration and the file it came
        from (``None`` when only defaults were used).

    Raises:
        ConfigError: If the selected file is unreadable or malformed.
        InvalidSettingError: If the file contains out-of-range settings.
    """
    config: FormatConfig = FormatConfig.from_defaults()
    if no_config:
        logger.debug("Config files disabled; using defaults")
        return config, None

    path: Path | None = config_path or discover_config(start or Path.cwd())
    if path is None:
        return config, None
    table: TomlTable = load_toml_dict(path)
    logger.info("Using config file %s", path)
    return config.merged_from_mapping(table, source=str(path)), path
