"""SQLAlchemy mapping metadata for the classification graph."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    Dialect,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers

from taxograph.domain.model import ClassificationNode, Edge, EdgeKind, NodeKind

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

node_table = Table(
    "node",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("kind", Enum(NodeKind, native_enum=False), nullable=False),
    Column("natural_key", String, nullable=False),
    Column("display_name", String, nullable=False),
    Column("external_ref", String, nullable=True),
    Column("taxonomy_ref", Integer, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
)

# Lookup index: (namespace, key, value) -> node. One node per entry.
node_index_table = Table(
    "node_index",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("namespace", String, nullable=False),
    Column("key", String, nullable=False),
    Column("value", String, nullable=False),
    Column(
        "node_id",
        UUIDColumnType,
        ForeignKey("node.id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("namespace", "key", "value"),
)

edge_table = Table(
    "edge",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("kind", Enum(EdgeKind, native_enum=False), nullable=False),
    Column(
        "source_id",
        UUIDColumnType,
        ForeignKey("node.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "target_id",
        UUIDColumnType,
        ForeignKey("node.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Index("ix_edge_target_kind", "target_id", "kind"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(ClassificationNode, node_table)
    mapper_registry.map_imperatively(Edge, edge_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
