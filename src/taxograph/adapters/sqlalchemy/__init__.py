"""SQLAlchemy adapter package for taxograph."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    edge_table,
    mapper_registry,
    node_index_table,
    node_table,
    start_mappers,
)
from .repositories import (
    SqlAlchemyEdgeRepository,
    SqlAlchemyNodeIndexRepository,
    SqlAlchemyNodeRepository,
)
from .unit_of_work import GraphDatabase, SqlAlchemyGraphUnitOfWork, StartupError, startup

__all__ = [
    "GraphDatabase",
    "SqlAlchemyEdgeRepository",
    "SqlAlchemyGraphUnitOfWork",
    "SqlAlchemyNodeIndexRepository",
    "SqlAlchemyNodeRepository",
    "StartupError",
    "create_all_tables",
    "edge_table",
    "mapper_registry",
    "node_index_table",
    "node_table",
    "start_mappers",
    "startup",
]
