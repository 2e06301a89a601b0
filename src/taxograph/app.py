"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from taxograph.adapters.rows import SqlRowSource
from taxograph.adapters.sqlalchemy import startup
from taxograph.config import DestinationExistsError, sqlite_uri
from taxograph.domain.ingest_pipeline import run_ingest_pipeline
from taxograph.domain.ports import GraphUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from taxograph.config import SourceConfig
    from taxograph.domain.ingest_pipeline import IngestCounters
    from taxograph.domain.ports import RowSource

UnitOfWorkFactory = Callable[[], GraphUnitOfWork]


log = getLogger(__name__)


def load_hierarchy(
    *,
    rows: RowSource,
    unit_of_work_factory: UnitOfWorkFactory,
) -> IngestCounters:
    """Materialise ``rows`` into the graph store opened by ``unit_of_work_factory``."""

    log.info("Starting hierarchy load")
    with unit_of_work_factory() as uow:
        counters = run_ingest_pipeline(rows=rows, uow=uow)

    log.info(
        "Finished hierarchy load: rows=%s, levels=%s, leaves=%s, chain_links=%s, "
        "memberships=%s, unattached=%s",
        counters.rows,
        counters.hierarchy_levels_created,
        counters.leaf_entities_created,
        counters.chain_links_created,
        counters.memberships_created,
        counters.unattached_leaves,
    )
    return counters


def load_from_source(*, destination: Path, source_config: SourceConfig) -> IngestCounters:
    """Create a new SQLite graph store at ``destination`` and fill it from the row source."""

    if destination.exists():
        raise DestinationExistsError(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    database = startup(database_uri=sqlite_uri(destination))
    source = SqlRowSource.from_config(source_config)
    try:
        return load_hierarchy(rows=source, unit_of_work_factory=database.unit_of_work)
    finally:
        source.close()
        database.shutdown()
