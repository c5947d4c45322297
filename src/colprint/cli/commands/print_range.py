# topmark:header:start
#
#   project      : ColPrint
#   file         : print_range.py
#   file_relpath : src/colprint/cli/commands/print_range.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint `range` command.

Prints its arguments as one range, like ``Formatter.print_range``: every
value is followed by the separator, the last one included.
"""

from __future__ import annotations

from typing import Any

import click

from colprint.cli.cmd_common import build_formatter, formats_floats, layout_errors
from colprint.cli.options import common_format_options
from colprint.cli.tokens import coerce_all


@click.command(
    name="range",
    help="Print VALUES as a range: each value followed by the separator.",
)
@click.argument("values", nargs=-1)
@common_format_options
def range_command(values: tuple[str, ...], **format_options: Any) -> None:
    """Print VALUES as one range."""
    ctx = click.get_current_context()
    fmt = build_formatter(ctx, **format_options)
    with layout_errors():
        fmt.print_range(coerce_all(values, floats=formats_floats(fmt)))
