"""Materialise one classification path as a chain of hierarchy-level nodes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taxograph.domain.attributes import attributes_of
from taxograph.domain.model import Edge, EdgeKind, NodeKind

if TYPE_CHECKING:
    from taxograph.domain.ingest_pipeline.context import PipelineContext
    from taxograph.domain.ingest_pipeline.node_store import NodeStore
    from taxograph.domain.model import ClassificationNode, HierarchyPath, Label

log = logging.getLogger(__name__)


class HierarchyChainBuilder:
    """Create one node per present slot and link each to the node of the previous slot.

    The parent of slot ``i`` is looked up by the raw label at slot ``i - 1``, not by
    the nearest present predecessor: a gap in the path means no chain link for the
    level after it. Chain links are deduplicated against the parent's incoming
    links, so shared prefixes across rows produce each link once.
    """

    def __init__(self, context: PipelineContext, node_store: NodeStore) -> None:
        self._context = context
        self._node_store = node_store

    def build_chain(self, path: HierarchyPath) -> list[ClassificationNode]:
        chain: list[ClassificationNode] = []
        for position, label in enumerate(path):
            if label is None:
                continue
            node = self._node_store.get_or_create(attributes_of(label))
            chain.append(node)
            if position > 0:
                self._link_to_parent(node, path[position - 1])
        return chain

    def _link_to_parent(self, node: ClassificationNode, parent_label: Label | None) -> None:
        if parent_label is None:
            return
        edges = self._context.repositories.edges
        for parent in self._node_store.lookup(NodeKind.HIERARCHY_LEVEL, parent_label):
            if parent.id == node.id:
                continue
            incoming = edges.incoming(parent, EdgeKind.CHAIN_LINK)
            if any(edge.source_id == node.id for edge in incoming):
                continue
            edges.add(Edge.between(EdgeKind.CHAIN_LINK, node, parent))
            self._context.counters.chain_links_created += 1
            log.debug("Linked %r -> %r", node, parent)
