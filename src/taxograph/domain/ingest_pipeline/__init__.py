"""Idempotent construction of the classification graph from ingest rows.

The pipeline is built bottom-up: ``NodeStore`` deduplicates nodes by natural key,
``HierarchyChainBuilder`` and ``LeafLinker`` use it to write chain and membership
edges, and ``IngestionPipeline`` drives both for every row.
"""

from __future__ import annotations

from .context import Clock, IngestCounters, PipelineContext
from .hierarchy import HierarchyChainBuilder
from .leaf import LeafLinker
from .node_store import NATURAL_KEY, NodeStore
from .orchestrator import IngestionPipeline, classification_target
from .runner import run_ingest_pipeline

__all__ = [
    "NATURAL_KEY",
    "Clock",
    "HierarchyChainBuilder",
    "IngestCounters",
    "IngestionPipeline",
    "LeafLinker",
    "NodeStore",
    "PipelineContext",
    "classification_target",
    "run_ingest_pipeline",
]
