# topmark:header:start
#
#   project      : ColPrint
#   file         : keys.py
#   file_relpath : src/colprint/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ColPrint configuration.

These constants are the external configuration API, as it appears in
``colprint.toml`` and in ``[tool.colprint]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ColPrint configuration.

    The ordering mirrors `colprint-default.toml`.
    """

    # pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_COLPRINT: Final[str] = "colprint"

    # Layout
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_LINE_TERMINATOR: Final[str] = "line_terminator"
    KEY_WIDTH: Final[str] = "width"
    KEY_ALIGNMENT: Final[str] = "alignment"

    # Numbers
    KEY_PRECISION: Final[str] = "precision"
    KEY_FLOAT_MODE: Final[str] = "float_mode"
