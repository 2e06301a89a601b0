"""Errors raised while resolving settings before a load starts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class ConfigurationError(RuntimeError):
    """A setting is present but unusable."""


class MissingConfigurationError(ConfigurationError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")


class DestinationExistsError(ConfigurationError):
    """The graph store destination already exists; loads never overwrite."""

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        super().__init__(f"{destination} already exists. Won't overwrite it")
