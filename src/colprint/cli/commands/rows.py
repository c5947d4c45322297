# topmark:header:start
#
#   project      : ColPrint
#   file         : rows.py
#   file_relpath : src/colprint/cli/commands/rows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `rows` command.

Reads each input as a range of lines and prints each range on its own line.
Rows are truncated to the length of the first input, or to ``--count``
elements when given.
"""

from __future__ import annotations

from typing import Any

import click

from colprint.cli.cmd_common import build_formatter, formats_floats, layout_errors
from colprint.cli.io import read_ranges
from colprint.cli.options import common_format_options


@click.command(
    name="rows",
    help="Print each of FILES as one row ('-' reads STDIN).",
)
@click.argument("files", nargs=-1, required=True)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Print only the first N elements of every input.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the input files.",
)
@common_format_options
def rows_command(
    files: tuple[str, ...],
    count: int | None,
    encoding: str,
    **format_options: Any,
) -> None:
    """Print FILES as rows."""
    ctx = click.get_current_context()
    fmt = build_formatter(ctx, **format_options)
    master, *others = read_ranges(files, encoding=encoding, floats=formats_floats(fmt))
    with layout_errors():
        if count is None:
            fmt.format_to_rows(master, *others)
        else:
            fmt.first_n_elements_rows(count, master, *others)
