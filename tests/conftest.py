from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from taxograph.adapters.sqlalchemy import GraphDatabase, SqlAlchemyGraphUnitOfWork, startup
from taxograph.domain.ingest_pipeline import PipelineContext

if TYPE_CHECKING:
    from collections.abc import Iterator

FIXED_NOW = datetime(2024, 5, 17, 12, 30, tzinfo=UTC)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def graph_database(sqlite_engine: Engine) -> GraphDatabase:
    return startup(engine=sqlite_engine)


@pytest.fixture
def uow(graph_database: GraphDatabase) -> Iterator[SqlAlchemyGraphUnitOfWork]:
    with graph_database.unit_of_work() as unit_of_work:
        yield unit_of_work


@pytest.fixture
def context(uow: SqlAlchemyGraphUnitOfWork) -> PipelineContext:
    return PipelineContext(uow=uow, clock=lambda: FIXED_NOW)
