"""Shared context structures for the ingest pipeline (store handle + counters)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from taxograph.domain.model import NodeKind, utcnow

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from taxograph.domain.ports import GraphRepositories, GraphUnitOfWork

Clock: TypeAlias = "Callable[[], datetime]"


@dataclass(slots=True)
class IngestCounters:
    """Running totals of the work an ingest run performed."""

    rows: int = 0
    hierarchy_levels_created: int = 0
    leaf_entities_created: int = 0
    chain_links_created: int = 0
    memberships_created: int = 0
    unattached_leaves: int = 0

    def record_node_created(self, kind: NodeKind) -> None:
        if kind is NodeKind.LEAF_ENTITY:
            self.leaf_entities_created += 1
        else:
            self.hierarchy_levels_created += 1

    @property
    def nodes_created(self) -> int:
        return self.hierarchy_levels_created + self.leaf_entities_created


@dataclass(slots=True)
class PipelineContext:
    """Explicit store handle shared by the ingest components of one run."""

    uow: GraphUnitOfWork
    counters: IngestCounters = field(default_factory=IngestCounters)
    clock: Clock = utcnow

    @property
    def repositories(self) -> GraphRepositories:
        return self.uow.repositories
