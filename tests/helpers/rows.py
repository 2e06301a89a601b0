from __future__ import annotations

from taxograph.domain.model import HierarchyPath, IngestRow, LeafDescriptor


def make_leaf(
    natural_key: str = "T1",
    *,
    display_name: str | None = None,
    external_ref: str | None = None,
    taxonomy_ref: int | None = 9606,
) -> LeafDescriptor:
    return LeafDescriptor(
        natural_key=natural_key,
        display_name=display_name or f"Target {natural_key}",
        external_ref=external_ref,
        taxonomy_ref=taxonomy_ref,
    )


def make_row(*levels: str | None, leaf: str = "T1", external_ref: str | None = None) -> IngestRow:
    return IngestRow(
        path=HierarchyPath.of(levels),
        leaf=make_leaf(leaf, external_ref=external_ref),
    )
