# topmark:header:start
#
#   project      : ColPrint
#   file         : errors.py
#   file_relpath : src/colprint/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for ColPrint.

These exceptions are Click-free so the formatter can be used from any program.
The CLI maps them onto its own `click.ClickException` subclasses
(see [`colprint.cli.errors`][]).

Failures raised by the sink itself (e.g. ``OSError`` on a closed file) are never
wrapped; they propagate unchanged.
"""

from __future__ import annotations


class ColprintError(Exception):
    """Base class for all ColPrint library errors."""


class FormatterCopyError(ColprintError, TypeError):
    """Raised when a `Formatter` is copied.

    A formatter is tied to one logical writer: its configuration and its sink
    reference must not be duplicated.
    """


class RangeTooShortError(ColprintError, ValueError):
    """Raised when a range holds fewer elements than the layout requires.

    Attributes:
        index (int): Position of the offending range (0 is the master range).
        required (int): Number of elements the layout needed.
        available (int): Number of elements the range actually provided.
    """

    def __init__(self, *, index: int, required: int, available: int) -> None:
        self.index = index
        self.required = required
        self.available = available
        which: str = "master range" if index == 0 else f"range #{index}"
        super().__init__(
            f"{which} is too short: {required} element(s) required, {available} available"
        )


class InvalidSettingError(ColprintError, ValueError):
    """Raised for an out-of-range formatter setting (negative width, unknown mode token...)."""


class ConfigError(ColprintError):
    """Raised for missing, unreadable or malformed configuration sources."""
