# topmark:header:start
#
#   project      : ColPrint
#   file         : __init__.py
#   file_relpath : src/colprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for ColPrint: model, TOML I/O and logging."""

from __future__ import annotations

from colprint.config.model import FormatConfig

__all__ = ["FormatConfig"]
