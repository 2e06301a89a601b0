"""Ports for reading ingest rows from an external source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from taxograph.domain.model import IngestRow


@runtime_checkable
class RowSource(Protocol):
    """Finite, ordered sequence of ingest rows.

    Implementations raise ``RowSourceError`` when the next row cannot be read.
    """

    def __iter__(self) -> Iterator[IngestRow]: ...
