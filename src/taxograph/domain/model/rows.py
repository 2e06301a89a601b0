"""Ephemeral ingest inputs: hierarchy paths, leaf descriptors, rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

MAX_HIERARCHY_DEPTH: Final[int] = 8

Label: TypeAlias = str


@dataclass(frozen=True, slots=True)
class HierarchyPath:
    """Fixed-width classification path; slot 0 is the most general level.

    Slot ``i`` is read as the parent of slot ``i + 1`` when both are present.
    """

    levels: tuple[Label | None, ...]

    def __post_init__(self) -> None:
        if len(self.levels) != MAX_HIERARCHY_DEPTH:
            raise ValueError(
                f"Hierarchy path must have exactly {MAX_HIERARCHY_DEPTH} slots, "
                f"got {len(self.levels)}"
            )

    @classmethod
    def of(cls, levels: Iterable[Label | None]) -> HierarchyPath:
        """Build a path from up to eight labels, padding the tail with ``None``.

        Only ``None`` marks an absent slot; empty strings are labels like any other.
        """

        materialized = list(levels)
        if len(materialized) > MAX_HIERARCHY_DEPTH:
            raise ValueError(
                f"Hierarchy path supports at most {MAX_HIERARCHY_DEPTH} levels, "
                f"got {len(materialized)}"
            )
        padding = [None] * (MAX_HIERARCHY_DEPTH - len(materialized))
        return cls(levels=(*materialized, *padding))

    def __getitem__(self, index: int) -> Label | None:
        return self.levels[index]

    def __iter__(self) -> Iterator[Label | None]:
        return iter(self.levels)

    def __len__(self) -> int:
        return MAX_HIERARCHY_DEPTH


@dataclass(frozen=True, slots=True)
class LeafDescriptor:
    natural_key: str
    display_name: str
    external_ref: str | None = None
    taxonomy_ref: int | None = None


@dataclass(frozen=True, slots=True)
class IngestRow:
    path: HierarchyPath
    leaf: LeafDescriptor
