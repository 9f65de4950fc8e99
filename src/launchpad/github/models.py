from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GitHook", "GitHubRepository", "GitUser"]


@dataclass(frozen=True, slots=True)
class GitUser:
    login: str
    email: str | None = None


@dataclass(frozen=True, slots=True)
class GitHubRepository:
    """Handle to a repository hosted on GitHub.

    Attributes:
        full_name: ``owner/name``.
        homepage: Public web URL of the repository.
        git_clone_uri: HTTPS clone URL.
    """

    full_name: str
    homepage: str
    git_clone_uri: str


@dataclass(frozen=True, slots=True)
class GitHook:
    """A webhook registered on a repository."""

    name: str
    url: str
    events: tuple[str, ...] = ()
