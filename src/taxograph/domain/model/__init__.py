"""Public domain model surface."""

from __future__ import annotations

from taxograph.domain.model.enums import EdgeKind, NodeKind
from taxograph.domain.model.graph import ClassificationNode, Edge, new_id, utcnow
from taxograph.domain.model.rows import (
    MAX_HIERARCHY_DEPTH,
    HierarchyPath,
    IngestRow,
    Label,
    LeafDescriptor,
)

__all__ = [
    "MAX_HIERARCHY_DEPTH",
    "ClassificationNode",
    "Edge",
    "EdgeKind",
    "HierarchyPath",
    "IngestRow",
    "Label",
    "LeafDescriptor",
    "NodeKind",
    "new_id",
    "utcnow",
]
