"""Row-by-row orchestration of chain building and leaf linking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taxograph.domain.ingest_pipeline.hierarchy import HierarchyChainBuilder
from taxograph.domain.ingest_pipeline.leaf import LeafLinker
from taxograph.domain.ingest_pipeline.node_store import NodeStore
from taxograph.domain.model import MAX_HIERARCHY_DEPTH

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taxograph.domain.ingest_pipeline.context import IngestCounters, PipelineContext
    from taxograph.domain.model import HierarchyPath, IngestRow, Label

log = logging.getLogger(__name__)


def classification_target(path: HierarchyPath) -> Label | None:
    """Return the label a row's leaf is attached to.

    Slots 1..7 are scanned for the first absent one; the label in the slot before
    it is the target. A path with all eight slots populated has no target.
    """

    for position in range(1, MAX_HIERARCHY_DEPTH):
        if path[position] is None:
            return path[position - 1]
    return None


class IngestionPipeline:
    """Drive chain building then leaf linking for each row, committing per row.

    Rows share no transaction: a failure aborts the run while every previously
    committed row stays in the store. Errors from the row source or the store are
    not retried.
    """

    def __init__(
        self,
        context: PipelineContext,
        *,
        chain_builder: HierarchyChainBuilder | None = None,
        leaf_linker: LeafLinker | None = None,
    ) -> None:
        self.context = context
        node_store = NodeStore(context)
        self.chain_builder = chain_builder or HierarchyChainBuilder(context, node_store)
        self.leaf_linker = leaf_linker or LeafLinker(context, node_store)

    def run(self, rows: Iterable[IngestRow]) -> IngestCounters:
        counters = self.context.counters
        for row in rows:
            self.ingest_row(row)
            self.context.uow.commit()
            counters.rows += 1
            if counters.rows % 1000 == 0:
                log.info("Ingested %s rows", counters.rows)
        return counters

    def ingest_row(self, row: IngestRow) -> None:
        log.debug("Ingesting leaf %r", row.leaf.natural_key)
        self.chain_builder.build_chain(row.path)
        self.leaf_linker.link_leaf(row.leaf, classification_target(row.path))
