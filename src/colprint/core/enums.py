# topmark:header:start
#
#   project      : ColPrint
#   file         : enums.py
#   file_relpath : src/colprint/core/enums.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed enums for formatter alignment and floating-point notation.

Both enums follow the same pattern: `.value` is a stable machine key used in
config files and on the command line, `.label` is a human label, and
`.aliases` lists extra tokens accepted by `parse()`.

The integer convention used by the formatter setters is implemented by
`from_mode()`: a positive mode, a negative mode and zero each select one member.

Example:
    ```python
    from colprint.core.enums import Alignment, FloatMode

    assert Alignment.from_mode(-1) is Alignment.RIGHT
    assert FloatMode.parse("sci") is FloatMode.SCIENTIFIC
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches the stable key, the member name and any configured alias.
        Matching is case-insensitive and normalizes '-', ' ' to '_'.

        Returns:
            _KS | None: The matching member, or ``None`` when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value) or token == _norm_token(m.name):
                return m
            if any(token == _norm_token(a) for a in m.aliases):
                return m
        return None

    @classmethod
    def keys(cls) -> list[str]:
        """Return the machine keys of all members, in definition order."""
        return [m.key for m in cls]


class Alignment(KeyedStrEnum):
    """How padding is distributed when a value is narrower than the field width.

    Attributes:
        LEFT: Value first, padding after.
        RIGHT: Padding first, value after.
        INTERNAL: Padding between a numeric sign and the digits; behaves like
            `RIGHT` for values without a sign.
    """

    LEFT = ("left", "Left aligned", ("<", "l"))
    RIGHT = ("right", "Right aligned", (">", "r"))
    INTERNAL = ("internal", "Padded after the sign", ("=", "i"))

    @classmethod
    def from_mode(cls, mode: int) -> Alignment:
        """Map an integer mode onto an alignment.

        Args:
            mode (int): ``> 0`` selects LEFT, ``< 0`` RIGHT, ``0`` INTERNAL.

        Returns:
            Alignment: The selected member.
        """
        if mode > 0:
            return cls.LEFT
        if mode < 0:
            return cls.RIGHT
        return cls.INTERNAL


class FloatMode(KeyedStrEnum):
    """Notation used for floating-point values.

    Attributes:
        DEFAULT: General format with `precision` significant digits (6 until set),
            switching to exponent notation for very large or small values.
        FIXED: Fixed-point notation with `precision` digits after the point.
        SCIENTIFIC: Exponent notation with `precision` digits after the point.
    """

    DEFAULT = ("default", "Default notation", ("general", "g"))
    FIXED = ("fixed", "Fixed-point notation", ("f",))
    SCIENTIFIC = ("scientific", "Scientific notation", ("sci", "e"))

    @classmethod
    def from_mode(cls, mode: int) -> FloatMode:
        """Map an integer mode onto a float notation.

        Args:
            mode (int): ``> 0`` selects FIXED, ``< 0`` SCIENTIFIC, ``0`` DEFAULT.

        Returns:
            FloatMode: The selected member.
        """
        if mode > 0:
            return cls.FIXED
        if mode < 0:
            return cls.SCIENTIFIC
        return cls.DEFAULT
