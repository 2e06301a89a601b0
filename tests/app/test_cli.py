from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from taxograph.config import DEFAULT_SOURCE_QUERY, SourceConfig
from taxograph.domain.ingest_pipeline import IngestCounters
from taxograph.ui import cli as cli_module

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SOURCE_DATABASE_URI", "SOURCE_QUERY_FILE", "SOURCE_TAXONOMY_REF"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_sql_logger() -> Iterator[None]:
    sql_logger = logging.getLogger("sqlalchemy.engine")
    previous = sql_logger.level
    yield
    sql_logger.setLevel(previous)


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    calls: dict[str, object] = {}

    def fake_load(**kwargs: object) -> IngestCounters:
        calls.update(kwargs)
        return IngestCounters(rows=3)

    monkeypatch.setattr(cli_module, "load_from_source", fake_load)
    return calls


def test_load_uses_environment_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, captured: dict[str, object]
) -> None:
    monkeypatch.setenv("SOURCE_DATABASE_URI", "sqlite:///chembl.db")
    destination = tmp_path / "graph.db"

    cli_module.main(["load", str(destination)])

    assert captured["destination"] == destination
    assert captured["source_config"] == SourceConfig(
        uri="sqlite:///chembl.db", query=DEFAULT_SOURCE_QUERY, taxonomy_ref=9606
    )


def test_load_with_flags(tmp_path: Path, captured: dict[str, object]) -> None:
    query_file = tmp_path / "rows.sql"
    query_file.write_text("SELECT 1", encoding="utf-8")

    cli_module.main(
        [
            "-v",
            "load",
            str(tmp_path / "graph.db"),
            "--source-uri",
            "sqlite:///other.db",
            "--query-file",
            str(query_file),
            "--taxonomy-ref",
            "10090",
        ]
    )

    assert captured["source_config"] == SourceConfig(
        uri="sqlite:///other.db", query="SELECT 1", taxonomy_ref=10090
    )


def test_existing_destination_exits_with_usage_error(
    tmp_path: Path, captured: dict[str, object]
) -> None:
    destination = tmp_path / "graph.db"
    destination.touch()

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["load", str(destination), "--source-uri", "sqlite://"])

    assert excinfo.value.code == 2
    assert captured == {}


def test_missing_source_uri_exits_with_usage_error(
    tmp_path: Path, captured: dict[str, object]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["load", str(tmp_path / "graph.db")])

    assert excinfo.value.code == 2
    assert captured == {}


def test_missing_command_is_an_argument_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2


def test_load_failure_exits_with_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def failing_load(**_: object) -> IngestCounters:
        raise RuntimeError("source went away")

    monkeypatch.setattr(cli_module, "load_from_source", failing_load)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["load", str(tmp_path / "graph.db"), "--source-uri", "sqlite://"])

    assert excinfo.value.code == 1
