from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from taxograph.app import load_from_source
from taxograph.config import (
    ConfigurationError,
    DestinationExistsError,
    configure_logging,
    get_source_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a classification graph store")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-row and per-node progress",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Load classification rows into a new graph store")
    load.add_argument(
        "destination",
        type=Path,
        help="Path of the SQLite graph store to create (must not exist)",
    )
    load.add_argument(
        "--source-uri",
        type=str,
        help="SQLAlchemy URI of the relational row source (defaults to SOURCE_DATABASE_URI)",
    )
    load.add_argument(
        "--query-file",
        type=Path,
        help="File holding the SQL query that yields classification rows",
    )
    load.add_argument(
        "--taxonomy-ref",
        type=int,
        help="Taxonomy id stamped on leaf entities (defaults to SOURCE_TAXONOMY_REF or 9606)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command != "load":
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
        source_config = get_source_config(
            uri=parsed_args.source_uri,
            query_file=parsed_args.query_file,
            taxonomy_ref=parsed_args.taxonomy_ref,
        )
        destination: Path = parsed_args.destination
        if destination.exists():
            raise DestinationExistsError(destination)  # noqa: TRY301
    except (ConfigurationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        counters = load_from_source(destination=destination, source_config=source_config)
    except Exception:
        log.exception("Fatal error during load")
        sys.exit(1)

    log.info("Loaded %s rows into %s", counters.rows, destination)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
