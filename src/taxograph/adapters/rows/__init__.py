"""Row source adapters."""

from __future__ import annotations

from .sql import LEVEL_COLUMNS, SqlRowSource

__all__ = ["LEVEL_COLUMNS", "SqlRowSource"]
