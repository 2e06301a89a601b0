"""Entry point for running the ingest pipeline against a unit of work."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taxograph.domain.model import utcnow

from .context import PipelineContext
from .orchestrator import IngestionPipeline

if TYPE_CHECKING:
    from collections.abc import Iterable

    from taxograph.domain.model import IngestRow
    from taxograph.domain.ports import GraphUnitOfWork

    from .context import Clock, IngestCounters


def run_ingest_pipeline(
    *,
    rows: Iterable[IngestRow],
    uow: GraphUnitOfWork,
    clock: Clock = utcnow,
) -> IngestCounters:
    """Run the default ingestion pipeline over ``rows`` and return counters."""

    context = PipelineContext(uow=uow, clock=clock)
    IngestionPipeline(context).run(rows)
    return context.counters
