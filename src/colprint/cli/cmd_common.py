# topmark:header:start
#
#   project      : ColPrint
#   file         : cmd_common.py
#   file_relpath : src/colprint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for the printing commands.

These helpers turn the common formatting options into a configured
[`Formatter`][colprint.core.formatter.Formatter] writing through the project
console, and translate library errors into CLI errors.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from colprint.cli.errors import ColprintUsageError
from colprint.cli.options import build_format_config
from colprint.config.logging import get_logger
from colprint.core.enums import FloatMode
from colprint.core.errors import InvalidSettingError, RangeTooShortError
from colprint.core.formatter import Formatter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from colprint.cli.console import ConsoleLike

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def build_formatter(ctx: click.Context, **format_options: Any) -> Formatter:
    """Create a formatter writing to the console, configured from CLI options.

    Args:
        ctx (click.Context): Current Click context (holds the console).
        **format_options (Any): The values collected by
            [`common_format_options`][colprint.cli.options.common_format_options].

    Returns:
        Formatter: The configured formatter.
    """
    config = build_format_config(**format_options)
    logger.debug("Effective config: %s", config)
    return Formatter.from_config(config, sink=get_console(ctx))


@contextmanager
def layout_errors() -> Iterator[None]:
    """Translate layout errors raised by the formatter into usage errors."""
    try:
        yield
    except (RangeTooShortError, InvalidSettingError) as exc:
        raise ColprintUsageError(str(exc)) from exc


def formats_floats(fmt: Formatter) -> bool:
    """Return True when precision or notation would change how floats print."""
    return fmt.precision is not None or fmt.float_mode is not FloatMode.DEFAULT
