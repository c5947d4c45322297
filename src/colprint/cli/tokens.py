# topmark:header:start
#
#   project      : ColPrint
#   file         : tokens.py
#   file_relpath : src/colprint/cli/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Coercion of command-line and file tokens into printable values.

Input text is printed as written unless a number is needed:

- integer tokens become ``int`` only when that does not change their text
  (``42`` and ``-7`` do, ``007`` and ``+3`` stay text), so numeric alignment
  applies without rewriting the data;
- decimal tokens become ``float`` only when float formatting is in effect
  (a precision or a non-default notation). Otherwise ``1.10`` stays ``1.10``.

Numbers are recognized with plain decimal syntax only, so words such as
``nan`` or ``Infinity`` and literals such as ``1_000`` always stay text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")


def coerce_token(token: str, *, floats: bool = False) -> int | float | str:
    """Convert ``token`` to a number when it can be printed as one.

    Args:
        token (str): The raw token.
        floats (bool): Whether decimal tokens should become ``float`` so the
            formatter's precision and notation apply to them.

    Returns:
        int | float | str: The number, or ``token`` unchanged.

    Examples:
        >>> coerce_token("42"), coerce_token("007"), coerce_token("1.10")
        (42, '007', '1.10')
        >>> coerce_token("-1.5e3", floats=True)
        -1500.0
    """
    if _INT_RE.fullmatch(token):
        value = int(token)
        return value if str(value) == token else token
    if floats and _FLOAT_RE.fullmatch(token):
        return float(token)
    return token


def coerce_all(tokens: Iterable[str], *, floats: bool = False) -> list[int | float | str]:
    """Coerce every token of ``tokens``."""
    return [coerce_token(t, floats=floats) for t in tokens]
