"""Git operations package using GitPython."""

from __future__ import annotations

from launchpad.git.repository import GitRepository, is_network_error

__all__ = ["GitRepository", "is_network_error"]
