# topmark:header:start
#
#   project      : ColPrint
#   file         : config.py
#   file_relpath : src/colprint/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `config` command group.

  * ``colprint config dump``: show the effective configuration as TOML.
  * ``colprint config init``: print the annotated starter configuration.
"""

from __future__ import annotations

from pathlib import Path

import click

from colprint.cli.cmd_common import get_console
from colprint.cli.errors import ColprintConfigError
from colprint.config.io import load_default_template_text, resolve_config, to_toml
from colprint.config.logging import get_logger
from colprint.core.errors import ConfigError, InvalidSettingError

logger = get_logger(__name__)


@click.group(
    name="config",
    help="Inspect and scaffold ColPrint configuration.",
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(
    name="dump",
    help="Show the effective configuration (defaults merged with the config file).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option("--no-config", is_flag=True, default=False, help="Ignore config files.")
def config_dump_command(config_path: Path | None, no_config: bool) -> None:
    """Print the effective configuration as TOML."""
    console = get_console(click.get_current_context())
    try:
        config, source = resolve_config(config_path=config_path, no_config=no_config)
    except (ConfigError, InvalidSettingError) as exc:
        raise ColprintConfigError(str(exc)) from exc
    console.print(f"# source: {source if source is not None else '<defaults>'}")
    console.print(to_toml(config.to_dict()), nl=False)


@config_command.command(
    name="init",
    help="Print an annotated starter colprint.toml.",
)
def config_init_command() -> None:
    """Print the packaged default configuration template."""
    console = get_console(click.get_current_context())
    console.print(load_default_template_text(), nl=False)
