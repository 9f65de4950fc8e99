"""Provisioning request and the state accumulated while serving it."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path

from launchpad.github.models import GitHook, GitHubRepository
from launchpad.identity import Identity

__all__ = ["CreateProjectile", "ProvisioningState"]


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class CreateProjectile:
    """A request to create a new project.

    Attributes:
        project_location: Directory holding the generated project content.
        openshift_project_name: Deployment project; also the default
            repository name.
        openshift_cluster_name: Registry id of the deployment cluster.
        github_identity: Credentials for GitHub (config token when None).
        openshift_identity: Credentials for OpenShift (config token when None).
        github_repository_name: Explicit repository name override.
        github_repository_description: Description of the new repository.
        id: Correlation id carried by every status event.
    """

    project_location: Path
    openshift_project_name: str
    openshift_cluster_name: str | None = None
    github_identity: Identity | None = None
    openshift_identity: Identity | None = None
    github_repository_name: str | None = None
    github_repository_description: str | None = None
    id: str = field(default_factory=_new_id)

    @property
    def repository_name(self) -> str:
        if self.github_repository_name is None:
            return self.openshift_project_name
        return self.github_repository_name


@dataclass(slots=True)
class ProvisioningState:
    """Per-request results threaded through the provisioning steps.

    Not shared between requests and not synchronised.
    """

    projectile: CreateProjectile
    github_repository: GitHubRepository | None = None
    webhooks: list[GitHook] = field(default_factory=list)
