# topmark:header:start
#
#   project      : ColPrint
#   file         : logging.py
#   file_relpath : src/colprint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for ColPrint.

Adds a TRACE level below DEBUG (used for formatter setter calls and layout
sizes), a logger class with ``.trace()``, and a yachalk formatter that colors
records by severity. Records go to stderr; formatted output always goes to the
caller's sink and never through a logger.

The level comes from the caller (the CLI's ``-v``/``-q``) or from the
``COLPRINT_LOG_LEVEL`` environment variable, e.g. ``COLPRINT_LOG_LEVEL=trace``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from colprint.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class ColprintLogger(logging.Logger):
    """Logger with a `trace` method for TRACE-level records."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.setLoggerClass(ColprintLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity (TRACE records are blue)."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        style: Callable[..., str] = chalk.blue
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(super().format(record))


def resolve_env_log_level() -> int | None:
    """Return the level named by ``COLPRINT_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``) and
    numeric values (``"15"``). Unknown names are ignored.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    token: str = raw.strip().upper()
    if token.isdigit():
        return int(token)
    return logging.getLevelNamesMapping().get(token)


def setup_logging(level: int | None = None) -> None:
    """Send log records to stderr through a `ChalkFormatter`.

    Replaces any handler already installed on the root logger. When ``level``
    is None the environment decides (see `resolve_env_log_level`), and
    CRITICAL applies if it is unset too. Levels below INFO use a format that
    also shows the logger name and line number.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> ColprintLogger:
    """Return the `ColprintLogger` called ``name``."""
    return cast("ColprintLogger", logging.getLogger(name))
