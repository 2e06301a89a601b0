"""Pure mapping from ingest descriptors to node attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from taxograph.domain.model import ClassificationNode, LeafDescriptor, NodeKind

if TYPE_CHECKING:
    from datetime import datetime

    from taxograph.domain.model import Label


@dataclass(frozen=True, slots=True)
class NodeAttributes:
    kind: NodeKind
    natural_key: str
    display_name: str
    external_ref: str | None = None
    taxonomy_ref: int | None = None

    def build_node(self, *, created_at: datetime) -> ClassificationNode:
        return ClassificationNode(
            natural_key=self.natural_key,
            display_name=self.display_name,
            kind=self.kind,
            external_ref=self.external_ref,
            taxonomy_ref=self.taxonomy_ref,
            created_at=created_at,
        )


def attributes_of(descriptor: LeafDescriptor | Label) -> NodeAttributes:
    """Return the attributes a node for ``descriptor`` is created with.

    A bare label describes a hierarchy level whose key and display name are the
    label itself; a ``LeafDescriptor`` describes a leaf entity.
    """

    if isinstance(descriptor, LeafDescriptor):
        return NodeAttributes(
            kind=NodeKind.LEAF_ENTITY,
            natural_key=descriptor.natural_key,
            display_name=descriptor.display_name,
            external_ref=descriptor.external_ref,
            taxonomy_ref=descriptor.taxonomy_ref,
        )
    if isinstance(descriptor, str):
        return NodeAttributes(
            kind=NodeKind.HIERARCHY_LEVEL,
            natural_key=descriptor,
            display_name=descriptor,
        )
    raise TypeError(f"Unsupported node descriptor: {type(descriptor).__name__}")
