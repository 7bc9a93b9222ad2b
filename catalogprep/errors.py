"""Fatal error types raised while preparing the catalog."""

from __future__ import annotations

from pathlib import Path


class CatalogError(RuntimeError):
    """Raised when a pass cannot continue (copy, directory or index failure)."""

    def __init__(self, message: str, *, source: Path | None = None, destination: Path | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination


__all__ = ["CatalogError"]
