# topmark:header:start
#
#   project      : ColPrint
#   file         : cells.py
#   file_relpath : src/colprint/core/cells.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of a single value into a padded text cell.

The rules mirror stream insertion:

- ``float`` values honour the float notation and precision;
- every other value is converted with ``str()`` (no type check beforehand;
  a failing ``__str__`` propagates to the caller);
- the text is padded with spaces up to the field width and never truncated.

`INTERNAL` alignment inserts the padding between a leading sign and the
digits of a number. For non-numeric values it behaves like `RIGHT`.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Final

from colprint.constants import DEFAULT_FLOAT_PRECISION
from colprint.core.enums import Alignment, FloatMode

_SIGNS: Final[str] = "+-"


def format_float(value: float, *, precision: int | None, float_mode: FloatMode) -> str:
    """Return the text of a float under the given notation.

    Args:
        value (float): The value to render.
        precision (int | None): Digits after the decimal point (significant digits
            in `DEFAULT` mode). ``None`` means "not set" and uses 6 digits.
        float_mode (FloatMode): The notation to use.

    Returns:
        str: The rendered number. Non-finite values render as ``nan``, ``inf``
        or ``-inf`` whatever the notation.
    """
    if not math.isfinite(value):
        return str(value)
    digits: int = DEFAULT_FLOAT_PRECISION if precision is None else precision
    if float_mode is FloatMode.FIXED:
        return f"{value:.{digits}f}"
    if float_mode is FloatMode.SCIENTIFIC:
        return f"{value:.{digits}e}"
    # General format treats a precision of 0 as 1.
    return f"{value:.{digits}g}"


def to_text(value: object, *, precision: int | None, float_mode: FloatMode) -> str:
    """Convert any printable value to its unpadded text."""
    if isinstance(value, float):
        return format_float(value, precision=precision, float_mode=float_mode)
    return str(value)


def is_numeric(value: object) -> bool:
    """Return True for real numbers other than booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def pad(text: str, *, width: int, alignment: Alignment, numeric: bool = False) -> str:
    """Pad ``text`` with spaces up to ``width`` characters.

    Args:
        text (str): The text to pad.
        width (int): Minimum width; text at least this long is returned unchanged.
        alignment (Alignment): Where the padding goes.
        numeric (bool): Whether ``text`` is a number (enables the internal split).

    Returns:
        str: The padded text.
    """
    fill: int = width - len(text)
    if fill <= 0:
        return text
    if alignment is Alignment.LEFT:
        return text + " " * fill
    if alignment is Alignment.INTERNAL and numeric and text and text[0] in _SIGNS:
        return text[0] + " " * fill + text[1:]
    return " " * fill + text


def render_cell(
    value: object,
    *,
    width: int,
    alignment: Alignment,
    precision: int | None,
    float_mode: FloatMode,
) -> str:
    """Render one value as a padded cell.

    Example:
        ```python
        render_cell(-3.5, width=7, alignment=Alignment.INTERNAL,
                    precision=None, float_mode=FloatMode.DEFAULT)
        # '-   3.5'
        ```
    """
    text: str = to_text(value, precision=precision, float_mode=float_mode)
    return pad(text, width=width, alignment=alignment, numeric=is_numeric(value))
