# topmark:header:start
#
#   project      : ColPrint
#   file         : io.py
#   file_relpath : src/colprint/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for Click commands.

Each input source (a file path, or ``-`` for STDIN) becomes one range: one
element per line, with the line ending removed and numeric lines coerced by
[`coerce_token`][colprint.cli.tokens.coerce_token].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from colprint.cli.errors import ColprintFileNotFoundError, ColprintIOError, ColprintUsageError
from colprint.cli.tokens import coerce_all
from colprint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def _read_lines(source: str, *, encoding: str) -> list[str]:
    if source == STDIN_SENTINEL:
        return click.get_text_stream("stdin", encoding=encoding).read().splitlines()
    path = Path(source)
    if not path.exists():
        raise ColprintFileNotFoundError(f"File not found: {source}")
    try:
        return path.read_text(encoding=encoding).splitlines()
    except UnicodeDecodeError as exc:
        raise ColprintIOError(f"Cannot decode {source} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise ColprintIOError(f"Cannot read {source}: {exc}") from exc


def read_ranges(
    sources: Sequence[str], *, encoding: str = "utf-8", floats: bool = False
) -> list[list[int | float | str]]:
    """Read every source into a range of coerced line values.

    Args:
        sources (Sequence[str]): File paths; ``-`` reads STDIN (at most once).
        encoding (str): Text encoding of the inputs.
        floats (bool): Coerce decimal lines to ``float`` (see
            [`coerce_token`][colprint.cli.tokens.coerce_token]).

    Returns:
        list[list[int | float | str]]: One range per source, in order.

    Raises:
        ColprintUsageError: If STDIN is requested more than once.
        ColprintFileNotFoundError: If a path does not exist.
        ColprintIOError: If a file cannot be read or decoded.
    """
    if sum(1 for s in sources if s == STDIN_SENTINEL) > 1:
        raise ColprintUsageError("STDIN ('-') can only be used once.")
    ranges: list[list[int | float | str]] = []
    for source in sources:
        lines: list[str] = _read_lines(source, encoding=encoding)
        logger.debug("Read %d line(s) from %s", len(lines), source)
        ranges.append(coerce_all(lines, floats=floats))
    return ranges
