from __future__ import annotations

from pathlib import Path

from launchpad.exceptions.base import LaunchpadError


class CatalogError(LaunchpadError):
    """Raised when the booster catalog cannot be read or is inconsistent.

    Attributes:
        message: Human-readable error message.
        path: Catalog file being read, if any.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message)
