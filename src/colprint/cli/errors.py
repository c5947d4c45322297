# topmark:header:start
#
#   project      : ColPrint
#   file         : errors.py
#   file_relpath : src/colprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ColPrint CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors from [`colprint.core.errors`][] are
    translated into these at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from colprint.cli.exit_codes import ExitCode


class ColprintCliError(click.ClickException):
    """Base class for all ColPrint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ColprintUsageError(ColprintCliError):
    """Error for command-line invocation errors (invalid flags/args, short ranges)."""

    exit_code = ExitCode.USAGE_ERROR


class ColprintConfigError(ColprintCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ColprintFileNotFoundError(ColprintCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ColprintIOError(ColprintCliError):
    """Error for I/O errors reading input files."""

    exit_code = ExitCode.IO_ERROR
