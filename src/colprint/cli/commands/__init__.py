# topmark:header:start
#
#   project      : ColPrint
#   file         : __init__.py
#   file_relpath : src/colprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click commands of the ColPrint CLI, one module per command."""

from __future__ import annotations
