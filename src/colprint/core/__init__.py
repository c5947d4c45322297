# topmark:header:start
#
#   project      : ColPrint
#   file         : __init__.py
#   file_relpath : src/colprint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core formatting primitives: the formatter, cell rendering, enums and sink flags.

This package has no dependency on Click so it can be used from any program.
"""

from __future__ import annotations
