"""Relational row source configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_int, require_env_vars
from .errors import ConfigurationError

# Leaf rows are loaded for human targets only, so every leaf carries this taxon.
DEFAULT_TAXONOMY_REF: Final[int] = 9606

DEFAULT_SOURCE_QUERY: Final[str] = """
SELECT
    td.tid, td.pref_name, cs.description, cs.accession, pfc.*
FROM
    target_dictionary td,
    target_components tc,
    component_sequences cs,
    component_class cc,
    protein_family_classification pfc
WHERE
    td.tax_id = :tax_id
    AND td.tid = tc.tid
    AND tc.component_id = cs.component_id
    AND cc.component_id = cs.component_id
    AND pfc.protein_class_id = cc.protein_class_id
"""


@dataclass(frozen=True, slots=True)
class SourceConfig:
    uri: str
    query: str = DEFAULT_SOURCE_QUERY
    taxonomy_ref: int = DEFAULT_TAXONOMY_REF


def read_query_file(path: Path) -> str:
    try:
        query = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read source query file {path}: {exc}") from exc
    if not query.strip():
        raise ConfigurationError(f"Source query file {path} is empty")
    return query


def get_source_config(
    *,
    uri: str | None = None,
    query_file: Path | None = None,
    taxonomy_ref: int | None = None,
) -> SourceConfig:
    """Resolve the row source settings; explicit arguments win over the environment."""

    resolved_uri = uri or require_env_vars(("SOURCE_DATABASE_URI",))["SOURCE_DATABASE_URI"]

    env_query_file = os.getenv("SOURCE_QUERY_FILE")
    query_path = query_file or (Path(env_query_file) if env_query_file else None)
    query = read_query_file(query_path) if query_path is not None else DEFAULT_SOURCE_QUERY

    if taxonomy_ref is None:
        taxonomy_ref = optional_env_int("SOURCE_TAXONOMY_REF", DEFAULT_TAXONOMY_REF)

    return SourceConfig(uri=resolved_uri, query=query, taxonomy_ref=taxonomy_ref)
