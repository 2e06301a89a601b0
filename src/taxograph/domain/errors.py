"""Errors raised by the ingest core and translated into by adapters."""

from __future__ import annotations


class IngestError(RuntimeError):
    """Base class for failures that abort an ingest run."""


class RowSourceError(IngestError):
    """Raised when the next row cannot be read from the row source."""


class StoreWriteError(IngestError):
    """Raised when a node, index entry or edge cannot be written to the graph store."""
