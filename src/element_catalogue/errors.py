from __future__ import annotations

from pathlib import Path


class CatalogueError(Exception):
    """Base class for element catalogue failures."""


class CatalogueLoadError(CatalogueError):
    """The dataset file could not be read or is not a usable element table."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MalformedRecordError(CatalogueError, ValueError):
    """A single dataset entry is unusable and gets dropped by the loader."""
