"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import EdgeRepository, NodeIndexRepository, NodeRepository
from .rows import RowSource
from .unit_of_work import (
    GraphRepositories,
    GraphUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "EdgeRepository",
    "GraphRepositories",
    "GraphUnitOfWork",
    "NodeIndexRepository",
    "NodeRepository",
    "RepositoryCollection",
    "RowSource",
    "UnitOfWork",
]
