# topmark:header:start
#
#   project      : ColPrint
#   file         : options.py
#   file_relpath : src/colprint/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based ColPrint CLI.

This module centralizes reusable options (verbosity, color, formatting) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

import click

from colprint.cli.cli_types import EnumChoiceParam
from colprint.cli.errors import ColprintConfigError, ColprintUsageError
from colprint.config.io import resolve_config
from colprint.config.logging import TRACE_LEVEL, get_logger
from colprint.core.enums import Alignment, FloatMode
from colprint.core.errors import ConfigError, InvalidSettingError

if TYPE_CHECKING:
    from colprint.config.model import FormatConfig

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ColprintUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ColprintUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase diagnostic logging. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Log errors only.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**: `FORCE_COLOR` (set and not ``"0"``) → True;
           `NO_COLOR` (set to any value) → False.
        3. **Auto**: return `stdout.isatty()`.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, stdout_isatty=True)
        True
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


_ESCAPES: dict[str, str] = {"\\": "\\", "n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def decode_escapes(text: str) -> str:
    r"""Decode the backslash escapes ``\\``, ``\n``, ``\t``, ``\r`` and ``\0``.

    Any other backslash sequence is kept verbatim.

    Examples:
        >>> decode_escapes(r"a\tb\n")
        'a\tb\n'
        >>> decode_escapes(r"C:\x")
        'C:\\x'
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text) and text[i + 1] in _ESCAPES:
            out.append(_ESCAPES[text[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _decode_callback(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> str | None:
    return None if value is None else decode_escapes(value)


def common_format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds config selection and formatter settings to a printing command.

    Options left unset keep the value from the config file (or the default).
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore colprint.toml / [tool.colprint] config files.",
    )(f)
    f = click.option(
        "-w",
        "--width",
        type=click.IntRange(min=0),
        default=None,
        help="Minimum width of every printed value.",
    )(f)
    f = click.option(
        "-s",
        "--separator",
        default=None,
        callback=_decode_callback,
        help=r"Text between values of one line (escapes like '\t' are decoded).",
    )(f)
    f = click.option(
        "-t",
        "--terminator",
        "line_terminator",
        default=None,
        callback=_decode_callback,
        help=r"Text after each line (escapes like '\n' are decoded).",
    )(f)
    f = click.option(
        "-a",
        "--align",
        "alignment",
        type=EnumChoiceParam(Alignment),
        default=None,
        help=f"Alignment ({', '.join(Alignment.keys())}).",
    )(f)
    f = click.option(
        "-p",
        "--precision",
        type=click.IntRange(min=0),
        default=None,
        help="Digits for floating-point values.",
    )(f)
    f = click.option(
        "-f",
        "--float-mode",
        "float_mode",
        type=EnumChoiceParam(FloatMode),
        default=None,
        help=f"Floating-point notation ({', '.join(FloatMode.keys())}).",
    )(f)
    return f


def build_format_config(
    *,
    config_path: Path | None,
    no_config: bool,
    **overrides: Any,
) -> FormatConfig:
    """Resolve the effective `FormatConfig` for a command.

    Args:
        config_path (Path | None): Explicit ``--config`` file.
        no_config (bool): Whether ``--no-config`` was passed.
        **overrides (Any): Formatter settings from the command line; ``None``
            means "not given".

    Returns:
        FormatConfig: Defaults, then the config file, then CLI overrides.

    Raises:
        ColprintConfigError: If the config file is unreadable or invalid.
    """
    try:
        config, source = resolve_config(config_path=config_path, no_config=no_config)
    except (ConfigError, InvalidSettingError) as exc:
        raise ColprintConfigError(str(exc)) from exc
    logger.debug("Config source: %s", source or "<defaults>")
    return config.merged(**overrides)
