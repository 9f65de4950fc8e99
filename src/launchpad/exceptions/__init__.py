"""Launchpad exception hierarchy.

All exceptions can be imported from this package:
    from launchpad.exceptions import CatalogError, GitHubError, ProvisioningStateError
"""

from __future__ import annotations

from launchpad.exceptions.base import LaunchpadError
from launchpad.exceptions.catalog import CatalogError
from launchpad.exceptions.config import ConfigError
from launchpad.exceptions.git import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    NothingToCommitError,
    PushRejectedError,
)
from launchpad.exceptions.github import DuplicateHookError, GitHubAuthError, GitHubError
from launchpad.exceptions.openshift import (
    ClusterNotFoundError,
    OpenShiftError,
    ProjectNotFoundError,
)
from launchpad.exceptions.provisioning import ProvisioningStateError

__all__ = [
    "CatalogError",
    "ClusterNotFoundError",
    "ConfigError",
    "DuplicateHookError",
    "GitError",
    "GitHubAuthError",
    "GitHubError",
    "GitNotFoundError",
    "LaunchpadError",
    "NotARepositoryError",
    "NothingToCommitError",
    "OpenShiftError",
    "ProjectNotFoundError",
    "ProvisioningStateError",
    "PushRejectedError",
]
