"""Ports for persisting the classification graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from taxograph.domain.model import ClassificationNode, Edge, EdgeKind


@runtime_checkable
class NodeRepository(Protocol):
    """Persistence contract for node records."""

    def add(self, node: ClassificationNode) -> None: ...

    def count(self) -> int: ...


@runtime_checkable
class NodeIndexRepository(Protocol):
    """Namespaced (key, value) -> node lookup index."""

    def put_if_absent(
        self, namespace: str, key: str, value: str, node: ClassificationNode
    ) -> bool:
        """Register ``node`` under ``(key, value)``; return False if already taken."""
        ...

    def lookup(self, namespace: str, key: str, value: str) -> list[ClassificationNode]:
        """Return every node registered under ``(key, value)`` (possibly none)."""
        ...


@runtime_checkable
class EdgeRepository(Protocol):
    """Persistence contract for typed edges."""

    def add(self, edge: Edge) -> None: ...

    def incoming(self, node: ClassificationNode, kind: EdgeKind) -> list[Edge]: ...

    def count(self, kind: EdgeKind | None = None) -> int: ...
