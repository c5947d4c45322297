# topmark:header:start
#
#   project      : ColPrint
#   file         : test_cli_line.py
#   file_relpath : tests/cli/test_cli_line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `line` and `range` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from colprint.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from tests.conftest import RunCli

pytestmark = pytest.mark.cli


def test_line_prints_values(run_cli: RunCli) -> None:
    """Arguments are printed on one line separated by a space."""
    result = run_cli(["line", "--no-config", "5", "5.5", "Salmon Dance"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "5 5.5 Salmon Dance\n"


def test_line_without_values_prints_blank_line(run_cli: RunCli) -> None:
    """No arguments give an empty line."""
    result = run_cli(["line", "--no-config"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == "\n"


def test_line_width_and_alignment(run_cli: RunCli) -> None:
    """Width and alignment options pad every value."""
    result = run_cli(["line", "--no-config", "-w", "4", "-a", "right", "1", "ab"])
    assert result.output == "   1   ab\n"


def test_line_internal_alignment_with_negative_number(run_cli: RunCli) -> None:
    """Negative numbers need ``--`` and are padded after the sign."""
    result = run_cli(["line", "--no-config", "-w", "5", "-a", "=", "--", "-12"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "-  12\n"


def test_line_float_options(run_cli: RunCli) -> None:
    """Precision and notation apply to numeric arguments only."""
    result = run_cli(["line", "--no-config", "-p", "2", "-f", "fixed", "2.5", "3", "x"])
    assert result.output == "2.50 3 x\n"


def test_line_scientific_notation(run_cli: RunCli) -> None:
    """Scientific notation can be selected by alias."""
    result = run_cli(["line", "--no-config", "-p", "2", "-f", "sci", "1234.5"])
    assert result.output == "1.23e+03\n"


def test_line_separator_and_terminator_escapes(run_cli: RunCli) -> None:
    r"""Escapes such as ``\t`` are decoded in separator and terminator."""
    result = run_cli(["line", "--no-config", "-s", r"\t", "-t", r";\n", "a", "b"])
    assert result.output == "a\tb;\n"


def test_line_invalid_alignment_is_usage_error(run_cli: RunCli) -> None:
    """Unknown alignment tokens are rejected by Click."""
    result = run_cli(["line", "--no-config", "-a", "centre", "x"])
    assert result.exit_code == 2
    assert "Must be one of: left, right, internal" in result.output


def test_line_negative_width_is_rejected(run_cli: RunCli) -> None:
    """Widths below zero are outside the accepted range."""
    result = run_cli(["line", "--no-config", "-w", "-1", "x"])
    assert result.exit_code == 2


def test_range_appends_separator_after_each_value(run_cli: RunCli) -> None:
    """`range` follows every value with the separator."""
    result = run_cli(["range", "--no-config", "-s", ",", "1", "2", "3"])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == "1,2,3,\n"


def test_range_without_values(run_cli: RunCli) -> None:
    """An empty range is just the terminator."""
    result = run_cli(["range", "--no-config"])
    assert result.output == "\n"


def test_line_keeps_numeric_text_without_float_options(run_cli: RunCli) -> None:
    """Arguments are printed as written unless float formatting is requested."""
    result = run_cli(["line", "--no-config", "1.10", "007", "0.3333333333"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "1.10 007 0.3333333333\n"
