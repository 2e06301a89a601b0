from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, text

from taxograph.adapters.sqlalchemy import startup
from taxograph.app import load_from_source, load_hierarchy
from taxograph.config import DestinationExistsError, SourceConfig, sqlite_uri
from taxograph.domain.model import EdgeKind, NodeKind
from tests.helpers.graph import edge_pairs, node_keys
from tests.helpers.rows import make_row

if TYPE_CHECKING:
    from pathlib import Path

    from taxograph.adapters.sqlalchemy import GraphDatabase

SOURCE_QUERY = """
SELECT tid, pref_name, accession, l1, l2, l3, l4, l5, l6, l7, l8
FROM target_rows
WHERE tax_id = :tax_id
ORDER BY tid
"""


def _write_source(path: Path) -> str:
    uri = sqlite_uri(path)
    engine = create_engine(uri, future=True)
    try:
        with engine.begin() as connection:
            connection.execute(
                text(
                    "CREATE TABLE target_rows ("
                    "tid INTEGER, pref_name TEXT, accession TEXT, tax_id INTEGER, "
                    "l1 TEXT, l2 TEXT, l3 TEXT, l4 TEXT, l5 TEXT, l6 TEXT, l7 TEXT, l8 TEXT)"
                )
            )
            connection.execute(
                text(
                    "INSERT INTO target_rows (tid, pref_name, accession, tax_id, l1, l2, l3) "
                    "VALUES (:tid, :name, :acc, :tax, :l1, :l2, :l3)"
                ),
                [
                    {"tid": 11, "name": "EGFR", "acc": "P00533", "tax": 9606,
                     "l1": "Enzyme", "l2": "Kinase", "l3": "Protein Kinase"},
                    {"tid": 12, "name": "Thrombin", "acc": "P00734", "tax": 9606,
                     "l1": "Enzyme", "l2": "Protease", "l3": None},
                    {"tid": 13, "name": "Mouse EGFR", "acc": "Q01279", "tax": 10090,
                     "l1": "Enzyme", "l2": "Kinase", "l3": "Protein Kinase"},
                ],
            )
    finally:
        engine.dispose()
    return uri


def test_load_hierarchy_reports_counters(graph_database: GraphDatabase) -> None:
    rows = [make_row("A", "B", leaf="T1"), make_row("A", "B", leaf="T2")]

    counters = load_hierarchy(rows=rows, unit_of_work_factory=graph_database.unit_of_work)

    assert counters.rows == 2
    assert counters.nodes_created == 4
    assert counters.chain_links_created == 1
    assert counters.memberships_created == 2
    assert counters.unattached_leaves == 0


def test_existing_destination_is_refused(tmp_path: Path) -> None:
    destination = tmp_path / "graph.db"
    destination.write_bytes(b"")

    with pytest.raises(DestinationExistsError, match="Won't overwrite"):
        load_from_source(
            destination=destination,
            source_config=SourceConfig(uri="sqlite+pysqlite:///:memory:"),
        )

    assert destination.read_bytes() == b""


def test_load_from_source_builds_a_new_store(tmp_path: Path) -> None:
    source_uri = _write_source(tmp_path / "chembl.db")
    destination = tmp_path / "out" / "graph.db"

    counters = load_from_source(
        destination=destination,
        source_config=SourceConfig(uri=source_uri, query=SOURCE_QUERY),
    )

    assert destination.is_file()
    assert counters.rows == 2
    assert counters.leaf_entities_created == 2

    database = startup(database_uri=sqlite_uri(destination))
    try:
        with database.unit_of_work() as uow:
            session = uow.session
            assert node_keys(session, NodeKind.HIERARCHY_LEVEL) == [
                "Enzyme",
                "Kinase",
                "Protease",
                "Protein Kinase",
            ]
            assert node_keys(session, NodeKind.LEAF_ENTITY) == ["11", "12"]
            assert edge_pairs(session, EdgeKind.CHAIN_LINK) == [
                ("Kinase", "Enzyme"),
                ("Protease", "Enzyme"),
                ("Protein Kinase", "Kinase"),
            ]
            assert edge_pairs(session, EdgeKind.MEMBERSHIP) == [
                ("11", "Protein Kinase"),
                ("12", "Protease"),
            ]
    finally:
        database.shutdown()
