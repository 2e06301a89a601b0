"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from taxograph.adapters.sqlalchemy.mappings import edge_table, node_index_table, node_table
from taxograph.domain.errors import StoreWriteError
from taxograph.domain.model import ClassificationNode, Edge, EdgeKind

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyNodeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, node: ClassificationNode) -> None:
        self.session.add(node)
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"Failed to create node {node!r}") from exc

    def count(self) -> int:
        stmt = select(func.count()).select_from(node_table)
        return self.session.execute(stmt).scalar_one()


class SqlAlchemyNodeIndexRepository:
    """Namespaced lookup index stored next to the nodes it points at."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def put_if_absent(
        self, namespace: str, key: str, value: str, node: ClassificationNode
    ) -> bool:
        taken = (
            select(node_index_table.c.id)
            .where(node_index_table.c.namespace == namespace)
            .where(node_index_table.c.key == key)
            .where(node_index_table.c.value == value)
            .limit(1)
        )
        try:
            if self.session.execute(taken).scalar_one_or_none() is not None:
                return False
            self.session.execute(
                node_index_table.insert().values(
                    namespace=namespace,
                    key=key,
                    value=value,
                    node_id=node.id,
                )
            )
        except SQLAlchemyError as exc:
            raise StoreWriteError(
                f"Failed to register {namespace}:{key}={value!r} in the node index"
            ) from exc
        return True

    def lookup(self, namespace: str, key: str, value: str) -> list[ClassificationNode]:
        stmt = (
            select(ClassificationNode)
            .join(node_index_table, node_index_table.c.node_id == node_table.c.id)
            .where(node_index_table.c.namespace == namespace)
            .where(node_index_table.c.key == key)
            .where(node_index_table.c.value == value)
            .order_by(node_index_table.c.id)
        )
        return list(self.session.scalars(stmt))


class SqlAlchemyEdgeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, edge: Edge) -> None:
        self.session.add(edge)
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreWriteError(f"Failed to create edge {edge!r}") from exc

    def incoming(self, node: ClassificationNode, kind: EdgeKind) -> list[Edge]:
        stmt = (
            select(Edge)
            .where(edge_table.c.target_id == node.id)
            .where(edge_table.c.kind == kind)
        )
        return list(self.session.scalars(stmt))

    def count(self, kind: EdgeKind | None = None) -> int:
        stmt = select(func.count()).select_from(edge_table)
        if kind is not None:
            stmt = stmt.where(edge_table.c.kind == kind)
        return self.session.execute(stmt).scalar_one()


if TYPE_CHECKING:
    from taxograph.domain.ports.persistence import (
        EdgeRepository,
        NodeIndexRepository,
        NodeRepository,
    )

    _session_stub = cast("Session", object())
    _node_repo: NodeRepository = SqlAlchemyNodeRepository(_session_stub)
    _index_repo: NodeIndexRepository = SqlAlchemyNodeIndexRepository(_session_stub)
    _edge_repo: EdgeRepository = SqlAlchemyEdgeRepository(_session_stub)
