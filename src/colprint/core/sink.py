# topmark:header:start
#
#   project      : ColPrint
#   file         : sink.py
#   file_relpath : src/colprint/core/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sink protocol and sticky per-sink formatting flags.

A sink is anything that accepts sequential text writes: ``sys.stdout``, an open
text file, ``io.StringIO``, or a [`colprint.cli.console.ClickConsole`][]. The
formatter holds a non-owning reference to it and never closes or flushes it.

Alignment, precision and float notation behave like stream flags: they are
stored per sink, so every formatter writing to the same sink observes the last
value set by any of them. The registry is weakly keyed and does not keep sinks
alive.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from colprint.config.logging import get_logger
from colprint.core.enums import Alignment, FloatMode

logger = get_logger(__name__)


@runtime_checkable
class TextSink(Protocol):
    """Minimal interface of a formatter sink."""

    def write(self, text: str, /) -> object:
        """Write ``text`` to the destination."""
        ...


@dataclass(slots=True)
class SinkFlags:
    """Sticky formatting flags attached to one sink.

    Attributes:
        alignment (Alignment): Current padding distribution.
        precision (int | None): Digits for floating-point output; ``None`` until set.
        float_mode (FloatMode): Current floating-point notation.
    """

    alignment: Alignment = Alignment.RIGHT
    precision: int | None = None
    float_mode: FloatMode = FloatMode.DEFAULT


_registry: weakref.WeakKeyDictionary[object, SinkFlags] = weakref.WeakKeyDictionary()


def flags_for(sink: object) -> SinkFlags:
    """Return the sticky flag record registered for ``sink``.

    A new record (stream defaults: right alignment, unset precision, default
    notation) is created on first use. Sinks that cannot be weakly referenced,
    or that are unhashable, get a fresh unshared record.

    Args:
        sink (object): The sink whose flags are requested.

    Returns:
        SinkFlags: The shared (or private) flag record.
    """
    try:
        flags: SinkFlags | None = _registry.get(sink)
        if flags is None:
            flags = SinkFlags()
            _registry[sink] = flags
        return flags
    except TypeError:
        logger.debug("Sink %r does not support weak references; flags are not shared", sink)
        return SinkFlags()
