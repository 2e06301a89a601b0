from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taxograph.domain.attributes import NodeAttributes, attributes_of
from taxograph.domain.model import LeafDescriptor, NodeKind


def test_label_maps_to_hierarchy_level_attributes() -> None:
    attributes = attributes_of("Protein Kinase")

    assert attributes == NodeAttributes(
        kind=NodeKind.HIERARCHY_LEVEL,
        natural_key="Protein Kinase",
        display_name="Protein Kinase",
    )


def test_leaf_descriptor_maps_to_leaf_attributes() -> None:
    leaf = LeafDescriptor(
        natural_key="CHEMBL1824",
        display_name="Epidermal growth factor receptor",
        external_ref="P00533",
        taxonomy_ref=9606,
    )

    attributes = attributes_of(leaf)

    assert attributes.kind is NodeKind.LEAF_ENTITY
    assert attributes.natural_key == "CHEMBL1824"
    assert attributes.display_name == "Epidermal growth factor receptor"
    assert attributes.external_ref == "P00533"
    assert attributes.taxonomy_ref == 9606


def test_unsupported_descriptor_is_rejected() -> None:
    with pytest.raises(TypeError):
        attributes_of(42)  # pyright: ignore[reportArgumentType]


def test_build_node_stamps_creation_time() -> None:
    created_at = datetime(2024, 1, 1, tzinfo=UTC)

    node = attributes_of("Enzyme").build_node(created_at=created_at)

    assert node.created_at == created_at
    assert node.kind is NodeKind.HIERARCHY_LEVEL
    assert node.external_ref is None
    assert node.taxonomy_ref is None
