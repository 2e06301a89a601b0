"""Idempotent get-or-create over persisted nodes keyed by natural key."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from taxograph.domain.errors import StoreWriteError

if TYPE_CHECKING:
    from taxograph.domain.attributes import NodeAttributes
    from taxograph.domain.ingest_pipeline.context import PipelineContext
    from taxograph.domain.model import ClassificationNode, NodeKind

log = logging.getLogger(__name__)

NATURAL_KEY: Final[str] = "natural_key"


class _IndexKeyTaken(Exception):  # noqa: N818
    """Signals that another node claimed the key between lookup and registration."""


class NodeStore:
    """Get-or-create access to nodes, scoped per ``NodeKind`` index namespace.

    Existing nodes are returned untouched: attributes passed for a key that is
    already registered are discarded (first writer wins). A new node and its index
    entry are written inside one savepoint so that a failure leaves neither behind.
    """

    def __init__(self, context: PipelineContext) -> None:
        self._context = context

    def lookup(self, kind: NodeKind, natural_key: str) -> list[ClassificationNode]:
        return self._context.repositories.index.lookup(
            kind.index_namespace, NATURAL_KEY, natural_key
        )

    def get_or_create(self, attributes: NodeAttributes) -> ClassificationNode:
        existing = self.lookup(attributes.kind, attributes.natural_key)
        if existing:
            return existing[0]

        repositories = self._context.repositories
        namespace = attributes.kind.index_namespace
        node = attributes.build_node(created_at=self._context.clock())
        try:
            with self._context.uow.savepoint():
                repositories.nodes.add(node)
                if not repositories.index.put_if_absent(
                    namespace, NATURAL_KEY, attributes.natural_key, node
                ):
                    raise _IndexKeyTaken(attributes.natural_key)
        except _IndexKeyTaken:
            winners = self.lookup(attributes.kind, attributes.natural_key)
            if not winners:
                raise StoreWriteError(
                    f"Index reported {namespace}:{attributes.natural_key!r} as taken "
                    "but it resolves to no node"
                ) from None
            log.debug("Lost creation race for %s:%r", namespace, attributes.natural_key)
            return winners[0]

        self._context.counters.record_node_created(attributes.kind)
        log.debug("Created %r", node)
        return node
