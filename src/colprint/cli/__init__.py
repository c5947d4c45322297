# topmark:header:start
#
#   project      : ColPrint
#   file         : __init__.py
#   file_relpath : src/colprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    colprint = "colprint.cli.main:cli"

All subcommands live in [`colprint.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
