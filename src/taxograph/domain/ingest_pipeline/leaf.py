"""Attach leaf entities to the hierarchy level that classifies them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taxograph.domain.attributes import attributes_of
from taxograph.domain.model import Edge, EdgeKind, NodeKind

if TYPE_CHECKING:
    from taxograph.domain.ingest_pipeline.context import PipelineContext
    from taxograph.domain.ingest_pipeline.node_store import NodeStore
    from taxograph.domain.model import ClassificationNode, Label, LeafDescriptor

log = logging.getLogger(__name__)


class LeafLinker:
    """Get-or-create a leaf node and add a membership edge to its classification.

    Membership edges are added without checking for an existing one, so ingesting
    the same row twice yields two edges between the same pair of nodes.
    """

    def __init__(self, context: PipelineContext, node_store: NodeStore) -> None:
        self._context = context
        self._node_store = node_store

    def link_leaf(self, leaf: LeafDescriptor, target_label: Label | None) -> ClassificationNode:
        node = self._node_store.get_or_create(attributes_of(leaf))
        counters = self._context.counters

        targets: list[ClassificationNode] = []
        if target_label is not None:
            targets = self._node_store.lookup(NodeKind.HIERARCHY_LEVEL, target_label)
        if not targets:
            counters.unattached_leaves += 1
            log.debug("Leaf %r left unattached (target=%r)", node, target_label)
            return node

        edges = self._context.repositories.edges
        for target in targets:
            edges.add(Edge.between(EdgeKind.MEMBERSHIP, node, target))
            counters.memberships_created += 1
        return node
