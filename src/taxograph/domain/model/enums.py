"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class NodeKind(StrEnum):
    """Discriminator for graph nodes; also selects the lookup index namespace."""

    HIERARCHY_LEVEL = "hierarchy_level"
    LEAF_ENTITY = "leaf_entity"

    @property
    def index_namespace(self) -> str:
        return f"node.{self.value}"


class EdgeKind(StrEnum):
    CHAIN_LINK = "chain_link"  # hierarchy level -> parent level
    MEMBERSHIP = "membership"  # leaf entity -> hierarchy level
