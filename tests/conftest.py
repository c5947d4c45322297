# topmark:header:start
#
#   project      : ColPrint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ColPrint test suite.

Sets up TRACE logging for the run, keeps the developer's COLPRINT_LOG_LEVEL
out of the tests, and provides small fixtures for formatter and CLI tests.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator, Sequence
from typing import IO, Any

import pytest
from click.testing import CliRunner, Result

from colprint.cli.main import cli
from colprint.config import logging
from colprint.core.formatter import Formatter

RunCli = Callable[..., Result]


@pytest.fixture(autouse=True)
def silence_colprint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("COLPRINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the logging setup performed by CLI invocations.

    The CLI reinstalls the root handler on a stream that `CliRunner` closes
    once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so diagnostics are captured on failure.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> io.StringIO:
    """Return a fresh in-memory sink (fresh sticky flags as well)."""
    return io.StringIO()


@pytest.fixture
def fmt(sink: io.StringIO) -> Formatter:
    """Return a default formatter writing to `sink`."""
    return Formatter(sink)


@pytest.fixture
def run_cli() -> RunCli:
    """Return a helper invoking the CLI with color disabled.

    Returns:
        RunCli: ``run(argv, input_text=None)`` returning the Click `Result`.
    """
    runner = CliRunner()

    def _run(argv: Sequence[str], input_text: str | bytes | IO[Any] | None = None) -> Result:
        return runner.invoke(cli, ["--no-color", *argv], input=input_text)

    return _run
