# topmark:header:start
#
#   project      : ColPrint
#   file         : formatter.py
#   file_relpath : src/colprint/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Formatter`: print values, argument lists and ranges to a text sink.

A formatter holds a non-owning reference to a sink and a handful of formatting
parameters. Every operation writes to the sink immediately, piece by piece,
and returns ``None``. Nothing is buffered, so output written before an error
stays written.

Formatting parameters come in two groups:

- *formatter-level*: separator, line terminator and field width;
- *sink-level* (sticky): alignment, precision and float notation. These are
  shared by all formatters writing to the same sink (see
  [`colprint.core.sink`][]). Constructing a formatter resets the sink's
  alignment to `Alignment.LEFT`.

Ranges are plain iterables. The master range is consumed once to learn its
length; the other ranges only need to be iterable and at least as long as the
layout requires. A shorter range raises
[`RangeTooShortError`][colprint.core.errors.RangeTooShortError] before the
line that would need the missing element is written.

Example:
    ```python
    import io
    from colprint import Formatter

    out = io.StringIO()
    fmt = Formatter(out)
    fmt.set_width(5)
    fmt.format_to_columns([1, 2], [1.1, 2.2], ["Cat", "Dog"])
    # out.getvalue() == "1     1.1   Cat  \\n2     2.2   Dog  \\n"
    ```
"""

from __future__ import annotations

import sys
from itertools import islice
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from colprint.config.logging import get_logger
from colprint.constants import DEFAULT_LINE_TERMINATOR, DEFAULT_SEPARATOR, DEFAULT_WIDTH
from colprint.core.cells import render_cell
from colprint.core.enums import Alignment, FloatMode
from colprint.core.errors import FormatterCopyError, InvalidSettingError, RangeTooShortError
from colprint.core.sink import SinkFlags, flags_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from colprint.config.logging import ColprintLogger
    from colprint.config.model import FormatConfig
    from colprint.core.sink import TextSink

logger: ColprintLogger = get_logger(__name__)

_M = TypeVar("_M", Alignment, FloatMode)


class Formatter:
    """Print-like writer with column and row layouts.

    Args:
        sink (TextSink | None): Destination of all output. The formatter does not
            own it and never closes or flushes it. Defaults to ``sys.stdout``
            as bound at construction time.
        separator (str): Text written between values of one line.
        line_terminator (str): Text written after each line.

    The four construction forms are covered by keyword defaults::

        Formatter()
        Formatter(sink)
        Formatter(separator=", ", line_terminator=";\\n")
        Formatter(sink, ", ", ";\\n")
    """

    def __init__(
        self,
        sink: TextSink | None = None,
        separator: str = DEFAULT_SEPARATOR,
        line_terminator: str = DEFAULT_LINE_TERMINATOR,
    ) -> None:
        self._sink: TextSink = sink if sink is not None else sys.stdout
        self._separator: str = separator
        self._line_terminator: str = line_terminator
        self._width: int = DEFAULT_WIDTH
        self._flags: SinkFlags = flags_for(self._sink)
        self.set_alignment(Alignment.LEFT)
        logger.debug(
            "Formatter created: sink=%r separator=%r line_terminator=%r",
            self._sink,
            separator,
            line_terminator,
        )

    @classmethod
    def from_config(cls, config: FormatConfig, sink: TextSink | None = None) -> Formatter:
        """Create a formatter and apply every setting of ``config``.

        Args:
            config (FormatConfig): The resolved formatting configuration.
            sink (TextSink | None): Destination; defaults to ``sys.stdout``.

        Returns:
            Formatter: The configured formatter.
        """
        fmt = cls(sink, config.separator, config.line_terminator)
        fmt.set_width(config.width)
        fmt.set_alignment(config.alignment)
        if config.precision is not None:
            fmt.set_precision(config.precision)
        fmt.set_float_mode(config.float_mode)
        return fmt

    # --- Copy protection ---

    def _refuse_copy(self) -> NoReturn:
        raise FormatterCopyError(
            "Formatter instances cannot be copied; create a new Formatter for the sink instead"
        )

    def __copy__(self) -> NoReturn:
        self._refuse_copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        self._refuse_copy()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sink={self._sink!r}, separator={self._separator!r}, "
            f"line_terminator={self._line_terminator!r}, width={self._width}, "
            f"alignment={self.alignment.key}, precision={self.precision}, "
            f"float_mode={self.float_mode.key})"
        )

    # --- Read-only state ---

    @property
    def sink(self) -> TextSink:
        """The sink all output is written to."""
        return self._sink

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @property
    def width(self) -> int:
        """Minimum width of every printed value (``0`` disables padding)."""
        return self._width

    @property
    def alignment(self) -> Alignment:
        """Current alignment of the sink."""
        return self._flags.alignment

    @property
    def precision(self) -> int | None:
        """Current float precision of the sink, ``None`` when never set."""
        return self._flags.precision

    @property
    def float_mode(self) -> FloatMode:
        """Current float notation of the sink."""
        return self._flags.float_mode

    # --- Low-level writes ---

    def _write(self, text: str) -> None:
        self._sink.write(text)

    def _write_cell(self, value: object) -> None:
        flags: SinkFlags = self._flags
        self._write(
            render_cell(
                value,
                width=self._width,
                alignment=flags.alignment,
                precision=flags.precision,
                float_mode=flags.float_mode,
            )
        )

    # --- Single-line printing ---

    def write_blank_line(self) -> None:
        """Write only the line terminator."""
        self._write(self._line_terminator)

    def write_line(self, *values: object) -> None:
        """Write ``values`` on one line.

        Each value is padded to the field width; values are separated by the
        separator and the line ends with the line terminator. Without values
        this is [`write_blank_line`][colprint.core.formatter.Formatter.write_blank_line].

        Args:
            *values (object): Printable values, written strictly in order.
        """
        if not values:
            self.write_blank_line()
            return
        last: int = len(values) - 1
        for i, value in enumerate(values):
            self._write_cell(value)
            self._write(self._separator if i < last else self._line_terminator)

    def __call__(self, *values: object) -> None:
        """Alias of `write_line`, for ``print()``-like use."""
        self.write_line(*values)

    # --- Range printing ---

    def print_range(self, values: Iterable[object]) -> None:
        """Write every element followed by the separator, then one line terminator.

        The separator also follows the last element.

        Args:
            values (Iterable[object]): A finite iterable of printable values.
        """
        for value in values:
            self._write_cell(value)
            self._write(self._separator)
        self._write(self._line_terminator)

    def format_to_columns(self, master: Iterable[object], *others: Iterable[object]) -> None:
        """Write one line per master element, with the matching elements of ``others``.

        Line *i* holds ``master[i]`` followed by the *i*-th element of every
        other range, written with the `write_line` rule. All ranges advance in
        lockstep exactly ``len(master)`` times; surplus elements of the other
        ranges are left unconsumed.

        Args:
            master (Iterable[object]): The range driving the number of lines.
            *others (Iterable[object]): Ranges providing the remaining columns.

        Raises:
            RangeTooShortError: If another range runs out before the master.
        """
        rows: list[object] = list(master)
        cursors = [iter(other) for other in others]
        logger.trace("format_to_columns: %d line(s), %d column(s)", len(rows), 1 + len(cursors))
        for line_no, head in enumerate(rows):
            cells: list[object] = [head]
            for index, cursor in enumerate(cursors, start=1):
                try:
                    cells.append(next(cursor))
                except StopIteration:
                    raise RangeTooShortError(
                        index=index, required=len(rows), available=line_no
                    ) from None
            self.write_line(*cells)

    def format_to_rows(self, master: Iterable[object], *others: Iterable[object]) -> None:
        """Write the master range as one line, then each other range as its own line.

        Every other range is truncated to the length of the master range.

        Args:
            master (Iterable[object]): The range printed first; fixes the row length.
            *others (Iterable[object]): Ranges printed on the following lines.

        Raises:
            RangeTooShortError: If another range holds fewer elements than the master.
        """
        head: list[object] = list(master)
        length: int = len(head)
        logger.trace("format_to_rows: %d row(s) of %d element(s)", 1 + len(others), length)
        self.print_range(head)
        for index, other in enumerate(others, start=1):
            row: list[object] = list(islice(other, length))
            if len(row) < length:
                raise RangeTooShortError(index=index, required=length, available=len(row))
            self.print_range(row)

    def first_n_elements_rows(
        self, n: int, master: Iterable[object], *others: Iterable[object]
    ) -> None:
        """Like `format_to_rows`, with the row length fixed to ``n``.

        Args:
            n (int): Number of elements taken from the start of every range.
            master (Iterable[object]): The first range.
            *others (Iterable[object]): Ranges printed on the following lines.

        Raises:
            InvalidSettingError: If ``n`` is negative.
            RangeTooShortError: If any range holds fewer than ``n`` elements.
        """
        if n < 0:
            raise InvalidSettingError(f"Element count must be non-negative, got {n}")
        head: list[object] = list(islice(master, n))
        if len(head) < n:
            raise RangeTooShortError(index=0, required=n, available=len(head))
        self.format_to_rows(head, *others)

    # --- Configuration setters ---

    def set_width(self, width: int) -> None:
        """Set the minimum field width of subsequently printed values.

        Raises:
            InvalidSettingError: If ``width`` is negative.
        """
        if width < 0:
            raise InvalidSettingError(f"Field width must be non-negative, got {width}")
        logger.trace("set_width: %d", width)
        self._width = width

    def set_separator(self, separator: str) -> None:
        """Replace the text written between values of one line."""
        logger.trace("set_separator: %r", separator)
        self._separator = separator

    def set_line_terminator(self, line_terminator: str) -> None:
        """Replace the text written after each line."""
        logger.trace("set_line_terminator: %r", line_terminator)
        self._line_terminator = line_terminator

    def set_alignment(self, mode: int | str | Alignment) -> None:
        """Set the sink's alignment.

        Args:
            mode (int | str | Alignment): An `Alignment`, a token accepted by
                `Alignment.parse`, or an integer: ``> 0`` left, ``< 0`` right,
                ``0`` internal.

        Raises:
            InvalidSettingError: If a string token names no alignment.
        """
        alignment: Alignment = _resolve_mode(Alignment, mode)
        logger.trace("set_alignment: %s", alignment.key)
        self._flags.alignment = alignment

    def set_precision(self, digits: int) -> None:
        """Set the number of digits used for subsequent floating-point values.

        Raises:
            InvalidSettingError: If ``digits`` is negative.
        """
        if digits < 0:
            raise InvalidSettingError(f"Precision must be non-negative, got {digits}")
        logger.trace("set_precision: %d", digits)
        self._flags.precision = digits

    def set_float_mode(self, mode: int | str | FloatMode) -> None:
        """Set the sink's floating-point notation.

        Args:
            mode (int | str | FloatMode): A `FloatMode`, a token accepted by
                `FloatMode.parse`, or an integer: ``> 0`` fixed, ``< 0``
                scientific, ``0`` default.

        Raises:
            InvalidSettingError: If a string token names no notation.
        """
        float_mode: FloatMode = _resolve_mode(FloatMode, mode)
        logger.trace("set_float_mode: %s", float_mode.key)
        self._flags.float_mode = float_mode


def _resolve_mode(enum_cls: type[_M], mode: int | str | _M) -> _M:
    """Resolve an enum member, a string token or an integer mode onto ``enum_cls``."""
    if isinstance(mode, enum_cls):
        return mode
    if isinstance(mode, str):
        member = enum_cls.parse(mode)
        if member is None:
            raise InvalidSettingError(
                f"Invalid {enum_cls.__name__.lower()} '{mode}'. "
                f"Must be one of: {', '.join(enum_cls.keys())}"
            )
        return member
    return enum_cls.from_mode(mode)
