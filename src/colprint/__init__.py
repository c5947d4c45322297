# topmark:header:start
#
#   project      : ColPrint
#   file         : __init__.py
#   file_relpath : src/colprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint package.

ColPrint is a small output-formatting helper. A `Formatter` wraps a writable
text sink and prints single values, argument lists, and multi-range tabular
layouts with a configurable separator, line terminator, field width,
alignment, precision and floating-point notation.

Example:
    ```python
    from colprint import Formatter

    fmt = Formatter()
    fmt.write_line(5, 5.5, "Salmon Dance")  # "5 5.5 Salmon Dance\\n"
    ```
"""

from __future__ import annotations

from colprint.config.model import FormatConfig
from colprint.core.enums import Alignment, FloatMode
from colprint.core.errors import (
    ColprintError,
    ConfigError,
    FormatterCopyError,
    InvalidSettingError,
    RangeTooShortError,
)
from colprint.core.formatter import Formatter

__all__ = [
    "Alignment",
    "ColprintError",
    "ConfigError",
    "FloatMode",
    "FormatConfig",
    "Formatter",
    "FormatterCopyError",
    "InvalidSettingError",
    "RangeTooShortError",
]
