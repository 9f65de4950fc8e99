"""GitHub repository-host collaborators."""

from __future__ import annotations

from launchpad.github.factory import GitHubServiceFactory, create_github_service
from launchpad.github.models import GitHook, GitHubRepository, GitUser
from launchpad.github.service import GitHubService, GitService

__all__ = [
    "GitHook",
    "GitHubRepository",
    "GitHubService",
    "GitHubServiceFactory",
    "GitService",
    "GitUser",
    "create_github_service",
]
