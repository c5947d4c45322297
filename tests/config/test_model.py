# topmark:header:start
#
#   project      : ColPrint
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for [`colprint.config.model.FormatConfig`][]."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from colprint.config.model import FormatConfig
from colprint.core.enums import Alignment, FloatMode
from colprint.core.errors import ConfigError, InvalidSettingError


def test_defaults() -> None:
    """Defaults match a freshly constructed formatter."""
    cfg = FormatConfig.from_defaults()
    assert cfg == FormatConfig(" ", "\n", 0, Alignment.LEFT, None, FloatMode.DEFAULT)


def test_config_is_frozen() -> None:
    """Configurations are immutable snapshots."""
    cfg = FormatConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.width = 3  # type: ignore[misc]


@pytest.mark.parametrize("kwargs", [{"width": -1}, {"precision": -3}])
def test_negative_values_are_rejected(kwargs: dict[str, int]) -> None:
    """Width and precision must be non-negative."""
    with pytest.raises(InvalidSettingError):
        FormatConfig(**kwargs)  # type: ignore[arg-type]


def test_from_mapping_reads_every_key() -> None:
    """All supported keys are read and enum tokens are parsed."""
    cfg = FormatConfig.from_mapping(
        {
            "separator": "|",
            "line_terminator": "\r\n",
            "width": 8,
            "alignment": "Internal",
            "precision": 3,
            "float_mode": "sci",
        }
    )
    assert cfg.separator == "|"
    assert cfg.line_terminator == "\r\n"
    assert cfg.width == 8
    assert cfg.alignment is Alignment.INTERNAL
    assert cfg.precision == 3
    assert cfg.float_mode is FloatMode.SCIENTIFIC


def test_from_mapping_missing_keys_keep_defaults() -> None:
    """Only the keys present override the defaults."""
    cfg = FormatConfig.from_mapping({"width": 4})
    assert cfg == FormatConfig(width=4)


def test_unknown_keys_are_logged_and_ignored(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys do not fail the load."""
    with caplog.at_level(logging.WARNING):
        cfg = FormatConfig.from_mapping({"colour": "red"}, source="colprint.toml")
    assert cfg == FormatConfig()
    assert "ignoring unknown config key 'colour'" in caplog.text
    assert "colprint.toml" in caplog.text


@pytest.mark.parametrize(
    "table",
    [
        {"width": "wide"},
        {"width": True},
        {"precision": 2.5},
        {"separator": 1},
        {"alignment": 1},
    ],
)
def test_wrong_types_raise_config_error(table: dict[str, object]) -> None:
    """Values of the wrong TOML type raise ConfigError naming the key."""
    key = next(iter(table))
    with pytest.raises(ConfigError, match=key):
        FormatConfig.from_mapping(table, source="test.toml")


def test_unknown_enum_token_is_invalid_setting() -> None:
    """An unknown alignment token lists the accepted ones."""
    with pytest.raises(InvalidSettingError, match="left, right, internal"):
        FormatConfig.from_mapping({"alignment": "centre"})


def test_negative_width_from_mapping_is_invalid_setting() -> None:
    """Range validation also applies to loaded values."""
    with pytest.raises(InvalidSettingError):
        FormatConfig.from_mapping({"width": -2})


def test_merged_ignores_none() -> None:
    """``None`` overrides leave the current value in place."""
    base = FormatConfig(width=5, precision=2)
    cfg = base.merged(width=None, precision=None, alignment=Alignment.RIGHT)
    assert cfg.width == 5
    assert cfg.precision == 2
    assert cfg.alignment is Alignment.RIGHT


def test_merged_from_mapping_layers_on_top() -> None:
    """A table is applied on top of the current configuration."""
    base = FormatConfig(width=5, separator=",")
    cfg = base.merged_from_mapping({"separator": ";"})
    assert cfg.width == 5
    assert cfg.separator == ";"


def test_to_dict_uses_keys_and_omits_unset_precision() -> None:
    """`to_dict` renders enum keys and drops an unset precision."""
    assert FormatConfig().to_dict() == {
        "separator": " ",
        "line_terminator": "\n",
        "width": 0,
        "alignment": "left",
        "float_mode": "default",
    }
    assert FormatConfig(precision=4).to_dict()["precision"] == 4


def test_to_dict_round_trips_through_from_mapping() -> None:
    """A rendered table loads back into an equal configuration."""
    cfg = FormatConfig("\t", ";", 3, Alignment.RIGHT, 1, FloatMode.FIXED)
    assert FormatConfig.from_mapping(cfg.to_dict()) == cfg
