"""Persisted graph entities: classification nodes and typed edges."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from taxograph.domain.model.enums import EdgeKind, NodeKind


def new_id() -> UUID:
    return uuid4()


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(eq=False, kw_only=True)
class ClassificationNode:
    """One hierarchy level or one leaf entity.

    ``natural_key`` is the sole deduplication key within the node's kind. Nodes are
    never updated after creation, so ``created_at`` keeps the first ingest time.
    """

    id: UUID = field(default_factory=new_id)
    natural_key: str
    display_name: str
    kind: NodeKind
    external_ref: str | None = None
    taxonomy_ref: int | None = None
    created_at: datetime = field(default_factory=utcnow)

    def __repr__(self) -> str:
        return f"ClassificationNode({self.kind.value}:{self.natural_key!r})"


@dataclass(eq=False, kw_only=True)
class Edge:
    """Directed, typed edge between two nodes (source -> target)."""

    id: UUID = field(default_factory=new_id)
    kind: EdgeKind
    source_id: UUID
    target_id: UUID

    @classmethod
    def between(
        cls, kind: EdgeKind, source: ClassificationNode, target: ClassificationNode
    ) -> Edge:
        return cls(kind=kind, source_id=source.id, target_id=target.id)

    def __repr__(self) -> str:
        return f"Edge({self.kind.value}: {self.source_id} -> {self.target_id})"
