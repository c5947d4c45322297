# topmark:header:start
#
#   project      : ColPrint
#   file         : __main__.py
#   file_relpath : src/colprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ColPrint via ``python -m colprint``.

It delegates directly to :func:`colprint.cli.main.cli`, so there is a single
CLI entry point regardless of how ColPrint is launched.

Examples:
    Print two files side by side::

        python -m colprint columns names.txt scores.txt
"""

from __future__ import annotations

from colprint.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
