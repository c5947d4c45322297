# topmark:header:start
#
#   project      : ColPrint
#   file         : constants.py
#   file_relpath : src/colprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColPrint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

COLPRINT_VERSION: str = get_version("colprint")

# Name of the bundled default config inside the package `colprint.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "colprint.config"
DEFAULT_TOML_CONFIG_NAME: str = "colprint-default.toml"

# Config discovery
COLPRINT_TOML_NAME: str = "colprint.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

TOPMARK_END_MARKER: str = "topmark:header:end"

# Formatter defaults
DEFAULT_SEPARATOR: str = " "
DEFAULT_LINE_TERMINATOR: str = "\n"
DEFAULT_WIDTH: int = 0

# Float digits used in every notation until a precision is set
DEFAULT_FLOAT_PRECISION: int = 6

LOG_LEVEL_ENV_VAR: str = "COLPRINT_LOG_LEVEL"
