"""Row source reading classification rows from a relational database."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from taxograph.config.source import DEFAULT_SOURCE_QUERY, DEFAULT_TAXONOMY_REF
from taxograph.domain.errors import RowSourceError
from taxograph.domain.model import MAX_HIERARCHY_DEPTH, HierarchyPath, IngestRow, LeafDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from sqlalchemy.engine import Engine

    from taxograph.config.source import SourceConfig

log = logging.getLogger(__name__)

LEVEL_COLUMNS: Final[tuple[str, ...]] = tuple(
    f"l{level}" for level in range(1, MAX_HIERARCHY_DEPTH + 1)
)
TAXONOMY_PARAM: Final[str] = "tax_id"


class SqlRowSource:
    """Stream ``IngestRow``s from the result of a textual SQL query.

    The query must yield the columns ``tid``, ``pref_name``, ``accession`` and
    ``l1``..``l8``. A ``:tax_id`` bind parameter, when present, is filled with the
    taxonomy reference that is also stamped on every leaf.
    """

    def __init__(
        self,
        engine: Engine,
        *,
        query: str = DEFAULT_SOURCE_QUERY,
        taxonomy_ref: int = DEFAULT_TAXONOMY_REF,
    ) -> None:
        self.engine = engine
        self.query = query
        self.taxonomy_ref = taxonomy_ref

    @classmethod
    def from_config(cls, config: SourceConfig) -> SqlRowSource:
        engine = create_engine(config.uri, future=True)
        return cls(engine, query=config.query, taxonomy_ref=config.taxonomy_ref)

    def __iter__(self) -> Iterator[IngestRow]:
        statement = text(self.query)
        params: dict[str, Any] = {}
        if TAXONOMY_PARAM in statement.compile().params:
            params[TAXONOMY_PARAM] = self.taxonomy_ref

        try:
            with self.engine.connect() as connection:
                result = connection.execute(statement, params).mappings()
                for record in result:
                    yield self.to_row(record)
        except SQLAlchemyError as exc:
            raise RowSourceError(f"Failed to read rows from {self.engine.url}") from exc

    def to_row(self, record: Mapping[str, Any]) -> IngestRow:
        try:
            levels = [record[column] for column in LEVEL_COLUMNS]
            leaf_id = record["tid"]
            if leaf_id is None:
                raise RowSourceError("Row source returned a row without a tid")  # noqa: TRY301
            natural_key = str(leaf_id)
            leaf = LeafDescriptor(
                natural_key=natural_key,
                display_name=record["pref_name"] or natural_key,
                external_ref=record["accession"],
                taxonomy_ref=self.taxonomy_ref,
            )
        except KeyError as exc:
            raise RowSourceError(f"Row source query is missing column {exc}") from exc
        return IngestRow(path=HierarchyPath.of(levels), leaf=leaf)

    def close(self) -> None:
        self.engine.dispose()


if TYPE_CHECKING:
    from taxograph.domain.ports import RowSource

    _source_check: RowSource = SqlRowSource(cast("Engine", object()))
