# topmark:header:start
#
#   project      : ColPrint
#   file         : version.py
#   file_relpath : src/colprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `version` command.

Prints the current ColPrint version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from colprint.cli.cmd_common import get_console
from colprint.constants import COLPRINT_VERSION


@click.command(
    name="version",
    help="Show the current version of ColPrint.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of ColPrint."""
    console = get_console(click.get_current_context())
    if output_format.lower() == "json":
        console.print(json.dumps({"version": COLPRINT_VERSION}))
    else:
        console.print(console.styled(COLPRINT_VERSION, bold=True))
