# topmark:header:start
#
#   project      : ColPrint
#   file         : test_cli_layouts.py
#   file_relpath : tests/cli/test_cli_layouts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `columns` and `rows` commands reading files and STDIN."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from colprint.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import RunCli

pytestmark = pytest.mark.cli


def _write(path: Path, *lines: str) -> str:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return str(path)


@pytest.fixture
def inputs(tmp_path: Path) -> tuple[str, str, str]:
    """Three small input files: integers, floats and words."""
    return (
        _write(tmp_path / "ints.txt", "1", "2"),
        _write(tmp_path / "floats.txt", "1.1", "2.2"),
        _write(tmp_path / "words.txt", "Cat", "Dog", "Emu"),
    )


def test_columns_side_by_side(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """Lines of all files are printed side by side, padded to the width."""
    result = run_cli(["columns", "--no-config", "-w", "5", *inputs])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "1     1.1   Cat  \n2     2.2   Dog  \n"


def test_columns_single_file(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """One file prints one value per line."""
    result = run_cli(["columns", "--no-config", inputs[2]])
    assert result.output == "Cat\nDog\nEmu\n"


def test_columns_float_formatting(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """Numeric lines are formatted as numbers."""
    result = run_cli(["columns", "--no-config", "-f", "fixed", "-p", "3", inputs[1]])
    assert result.output == "1.100\n2.200\n"


def test_columns_reads_stdin(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """``-`` stands for STDIN."""
    result = run_cli(["columns", "--no-config", "-s", ",", "-", inputs[0]], input_text="a\nb\n")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "a,1\nb,2\n"


def test_columns_short_range_is_usage_error(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """A shorter secondary file stops with a usage error after the complete lines."""
    words, ints = inputs[2], inputs[0]
    result = run_cli(["columns", "--no-config", words, ints])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert result.output.startswith("Cat 1\nDog 2\n")
    assert "range #1 is too short: 3 element(s) required, 2 available" in result.output


def test_columns_missing_file(run_cli: RunCli, tmp_path: Path) -> None:
    """A missing input exits with the file-not-found code."""
    result = run_cli(["columns", "--no-config", str(tmp_path / "nope.txt")])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "File not found" in result.output


def test_columns_undecodable_file(run_cli: RunCli, tmp_path: Path) -> None:
    """Bytes that do not decode exit with the I/O error code."""
    path = tmp_path / "latin1.txt"
    path.write_bytes("café\n".encode("latin-1"))
    result = run_cli(["columns", "--no-config", str(path)])
    assert result.exit_code == ExitCode.IO_ERROR


def test_columns_requires_a_file(run_cli: RunCli) -> None:
    """At least one input is required."""
    result = run_cli(["columns", "--no-config"])
    assert result.exit_code == 2


def test_stdin_only_once(run_cli: RunCli) -> None:
    """STDIN cannot be read twice."""
    result = run_cli(["columns", "--no-config", "-", "-"], input_text="a\n")
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "only be used once" in result.output


def test_rows_truncate_to_master(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """Each file is one row, cut to the length of the first file."""
    ints, floats, words = inputs
    result = run_cli(["rows", "--no-config", ints, floats, words])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "1 2 \n1.1 2.2 \nCat Dog \n"


def test_rows_short_range_is_usage_error(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """A row shorter than the master stops before it is written."""
    ints, _floats, words = inputs
    result = run_cli(["rows", "--no-config", words, ints])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert result.output.startswith("Cat Dog Emu \n")
    assert "range #1 is too short" in result.output


def test_rows_with_count(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """``--count`` limits every row to its first N elements."""
    ints, _floats, words = inputs
    result = run_cli(["rows", "--no-config", "-n", "1", words, ints])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "Cat \n1 \n"


def test_rows_count_longer_than_master(run_cli: RunCli, inputs: tuple[str, str, str]) -> None:
    """A count beyond the master's length is a usage error."""
    result = run_cli(["rows", "--no-config", "-n", "5", inputs[0]])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "master range is too short" in result.output


def test_columns_print_numeric_text_as_written(run_cli: RunCli, tmp_path: Path) -> None:
    """Leading zeros, trailing decimal zeros and huge exponents are not rewritten."""
    numbers = _write(tmp_path / "numbers.txt", "007", "1.10", "1e400")
    letters = _write(tmp_path / "letters.txt", "x", "y", "z")
    result = run_cli(["columns", "--no-config", numbers, letters])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "007 x\n1.10 y\n1e400 z\n"


def test_columns_reformat_decimals_only_when_asked(run_cli: RunCli, tmp_path: Path) -> None:
    """With a precision set, decimal lines are formatted; other text is kept."""
    numbers = _write(tmp_path / "numbers.txt", "007", "1.10", "2.5")
    result = run_cli(["columns", "--no-config", "-p", "1", "-f", "fixed", numbers])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "007\n1.1\n2.5\n"
