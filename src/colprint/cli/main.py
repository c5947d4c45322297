# topmark:header:start
#
#   project      : ColPrint
#   file         : main.py
#   file_relpath : src/colprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console from there and write all program
output through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colprint.cli.commands.columns import columns_command
from colprint.cli.commands.config import config_command
from colprint.cli.commands.line import line_command
from colprint.cli.commands.print_range import range_command
from colprint.cli.commands.rows import rows_command
from colprint.cli.commands.version import version_command
from colprint.cli.console import ClickConsole
from colprint.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from colprint.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from colprint.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # COLPRINT_LOG_LEVEL wins over -v/-q.
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ColPrint: print values, columns and rows with configurable layout.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ColPrint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'colprint columns FILE...' to print files side by side.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(line_command)

cli.add_command(range_command)

cli.add_command(columns_command)

cli.add_command(rows_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
