# topmark:header:start
#
#   project      : ColPrint
#   file         : columns.py
#   file_relpath : src/colprint/cli/commands/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `columns` command.

Reads each input as a range of lines and prints them side by side. The first
input is the master range: it fixes the number of output lines, and every
other input must have at least as many lines.
"""

from __future__ import annotations

from typing import Any

import click

from colprint.cli.cmd_common import build_formatter, formats_floats, layout_errors
from colprint.cli.io import read_ranges
from colprint.cli.options import common_format_options


@click.command(
    name="columns",
    help="Print the lines of FILES side by side ('-' reads STDIN).",
)
@click.argument("files", nargs=-1, required=True)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the input files.",
)
@common_format_options
def columns_command(files: tuple[str, ...], encoding: str, **format_options: Any) -> None:
    """Print FILES as columns, one output line per line of the first file."""
    ctx = click.get_current_context()
    fmt = build_formatter(ctx, **format_options)
    master, *others = read_ranges(files, encoding=encoding, floats=formats_floats(fmt))
    with layout_errors():
        fmt.format_to_columns(master, *others)
