"""Graph store location helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def sqlite_uri(path: Path) -> str:
    return f"sqlite+pysqlite:///{path}"
