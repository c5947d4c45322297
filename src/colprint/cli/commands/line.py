# topmark:header:start
#
#   project      : ColPrint
#   file         : line.py
#   file_relpath : src/colprint/cli/commands/line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `line` command.

Prints its arguments on one line, like ``Formatter.write_line``.
Arguments are printed as written; decimal arguments become numbers only
when a precision or float notation is set, so those settings apply to them.
"""

from __future__ import annotations

from typing import Any

import click

from colprint.cli.cmd_common import build_formatter, formats_floats, layout_errors
from colprint.cli.options import common_format_options
from colprint.cli.tokens import coerce_all


@click.command(
    name="line",
    help="Print VALUES on one line, separated and padded.",
)
@click.argument("values", nargs=-1)
@common_format_options
def line_command(values: tuple[str, ...], **format_options: Any) -> None:
    """Print VALUES on one line; without VALUES, print an empty line."""
    ctx = click.get_current_context()
    fmt = build_formatter(ctx, **format_options)
    with layout_errors():
        fmt.write_line(*coerce_all(values, floats=formats_floats(fmt)))
