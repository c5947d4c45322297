# topmark:header:start
#
#   project      : ColPrint
#   file         : test_formatter_properties.py
#   file_relpath : tests/core/test_formatter_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the formatter layouts.

The generated inputs check that:
1) a line is exactly the padded cells joined by the separator,
2) padding never truncates and always reaches the field width,
3) column and row layouts emit one line per master element / per range.
"""

from __future__ import annotations

import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from colprint.core.cells import pad
from colprint.core.enums import Alignment
from colprint.core.formatter import Formatter

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_PLAIN_TEXT = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="\n"),
    max_size=12,
)


@settings(max_examples=200, deadline=None)
@given(
    values=st.lists(_PLAIN_TEXT, min_size=1, max_size=8),
    separator=st.sampled_from([" ", ", ", "\t", "|", ""]),
    terminator=st.sampled_from(["\n", "\r\n", ";"]),
)
def test_write_line_is_join_of_values(values: list[str], separator: str, terminator: str) -> None:
    """Without a width, a line is the values joined by the separator plus the terminator."""
    out = io.StringIO()
    Formatter(out, separator, terminator).write_line(*values)
    assert out.getvalue() == separator.join(values) + terminator


@settings(max_examples=300, deadline=None)
@given(
    text=_PLAIN_TEXT,
    width=st.integers(min_value=0, max_value=20),
    alignment=st.sampled_from(list(Alignment)),
    numeric=st.booleans(),
)
def test_pad_reaches_width_without_truncating(
    text: str, width: int, alignment: Alignment, numeric: bool
) -> None:
    """A padded cell is ``max(width, len(text))`` long and only adds spaces."""
    cell: str = pad(text, width=width, alignment=alignment, numeric=numeric)
    assert len(cell) == max(width, len(text))
    assert sorted(cell.replace(" ", "")) == sorted(text.replace(" ", ""))


@settings(max_examples=100, deadline=None)
@given(
    master=st.lists(st.integers(), max_size=10),
    extra=st.integers(min_value=0, max_value=3),
    n_others=st.integers(min_value=0, max_value=3),
)
def test_columns_write_one_line_per_master_element(
    master: list[int], extra: int, n_others: int
) -> None:
    """Each master element yields exactly one line; longer other ranges are fine."""
    out = io.StringIO()
    others = [list(range(len(master) + extra)) for _ in range(n_others)]
    Formatter(out).format_to_columns(master, *others)
    lines = out.getvalue().splitlines()
    assert len(lines) == len(master)
    for i, line in enumerate(lines):
        assert line.split(" ") == [str(master[i])] + [str(i)] * n_others


@settings(max_examples=100, deadline=None)
@given(
    ranges=st.lists(st.lists(st.integers(), min_size=3, max_size=6), min_size=1, max_size=5),
    n=st.integers(min_value=0, max_value=3),
)
def test_first_n_rows_take_n_elements_of_every_range(ranges: list[list[int]], n: int) -> None:
    """Every range becomes one line of ``n`` cells, each followed by the separator."""
    out = io.StringIO()
    Formatter(out).first_n_elements_rows(n, *ranges)
    lines = out.getvalue().split("\n")
    assert lines[-1] == ""
    assert len(lines) - 1 == len(ranges)
    for line, rng in zip(lines, ranges):
        assert line == "".join(f"{v} " for v in rng[:n])
