"""SQLAlchemy-backed unit of work for the graph store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from taxograph.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from taxograph.adapters.sqlalchemy.repositories import (
    SqlAlchemyEdgeRepository,
    SqlAlchemyNodeIndexRepository,
    SqlAlchemyNodeRepository,
)
from taxograph.domain.errors import StoreWriteError
from taxograph.domain.ports import GraphRepositories

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

    from sqlalchemy.engine import Connection, Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the graph store is started without a location or used outside ``with``."""


@dataclass(slots=True)
class GraphDatabase:
    """Engine plus session factory for one graph store; passed around explicitly."""

    engine: Engine
    session_factory: sessionmaker[Session]

    def unit_of_work(self) -> SqlAlchemyGraphUnitOfWork:
        return SqlAlchemyGraphUnitOfWork(self.session_factory)

    def shutdown(self) -> None:
        """Dispose the engine's connection pool."""

        self.engine.dispose()


def _disable_driver_transactions(dbapi_connection: Any, _record: object) -> None:
    dbapi_connection.isolation_level = None


def _emit_begin(connection: Connection) -> None:
    connection.exec_driver_sql("BEGIN")


def _enable_sqlite_savepoints(engine: Engine) -> None:
    """Let SQLAlchemy emit BEGIN itself so SAVEPOINT nests inside the session transaction.

    pysqlite otherwise defers BEGIN until the first DML statement, and releasing a
    savepoint opened before that point commits the whole connection.
    """

    if event.contains(engine, "begin", _emit_begin):
        return
    event.listen(engine, "connect", _disable_driver_transactions)
    event.listen(engine, "begin", _emit_begin)


def startup(*, engine: Engine | None = None, database_uri: str | None = None) -> GraphDatabase:
    """Initialise mappers and tables and return a handle on the graph store.

    The store location is always explicit: pass an ``engine`` or a ``database_uri``.
    """

    if engine is None:
        if database_uri is None:
            raise StartupError("startup() needs an engine or a database_uri")
        engine = create_engine(database_uri, future=True)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    start_mappers()
    create_all_tables(engine)
    log.info("Graph store ready at %s", engine.url)
    return GraphDatabase(
        engine=engine,
        session_factory=sessionmaker(bind=engine, expire_on_commit=False),
    )


class SqlAlchemyGraphUnitOfWork:
    """Unit of work managing one SQLAlchemy session over the graph repositories."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self._session: Session | None = None
        self._repositories: GraphRepositories | None = None

    def __enter__(self) -> SqlAlchemyGraphUnitOfWork:
        self.session = self.session_factory()
        self._repositories = GraphRepositories(
            nodes=SqlAlchemyNodeRepository(self.session),
            index=SqlAlchemyNodeIndexRepository(self.session),
            edges=SqlAlchemyEdgeRepository(self.session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        self._repositories = None
        return False  # don't swallow exceptions

    @contextmanager
    def savepoint(self) -> Iterator[None]:
        """Nested transaction: released on normal exit, rolled back on any exception."""

        try:
            with self.session.begin_nested():
                yield
        except SQLAlchemyError as exc:
            raise StoreWriteError("Scoped graph write failed and was rolled back") from exc

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            raise StoreWriteError("Failed to commit graph writes") from exc

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> GraphRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


if TYPE_CHECKING:
    from taxograph.domain.ports import GraphUnitOfWork

    _uow_check: GraphUnitOfWork = SqlAlchemyGraphUnitOfWork(sessionmaker())
