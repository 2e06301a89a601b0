"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SQL_LOGGER: Final[str] = "sqlalchemy.engine"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse CLI format.

    Emitted SQL is only logged when ``level`` is DEBUG; otherwise the SQLAlchemy
    engine logger is held at WARNING. Pass ``force=True`` to replace handlers that
    are already installed.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    sql_level = logging.INFO if level <= logging.DEBUG else logging.WARNING
    logging.getLogger(SQL_LOGGER).setLevel(sql_level)
