"""GitHub provisioning steps: create repository, push content, wire webhooks.

Each step checks the state left by the previous one and raises
:class:`ProvisioningStateError` when it is missing; nothing else enforces
the ordering.
"""

from __future__ import annotations

from launchpad.constants import LOGGED_USER_VARIABLE, README_FILENAME, WEBHOOK_EVENTS
from launchpad.exceptions import (
    ClusterNotFoundError,
    DuplicateHookError,
    GitHubError,
    ProjectNotFoundError,
    ProvisioningStateError,
)
from launchpad.github import GitHook, GitHubRepository, GitHubServiceFactory, GitService
from launchpad.logging import get_logger
from launchpad.openshift import OpenShiftClusterRegistry, OpenShiftServiceFactory
from launchpad.provisioning.events import (
    StatusEmitter,
    StatusEventType,
    StatusMessageEvent,
)
from launchpad.provisioning.projectile import ProvisioningState
from launchpad.provisioning.readme import replace_file_variables

__all__ = ["GitHubSteps"]

logger = get_logger(__name__)


def _require_repository(
    state: ProvisioningState, step: StatusEventType
) -> GitHubRepository:
    if state.github_repository is None:
        raise ProvisioningStateError("GitHub repository is not set", step=step.value)
    return state.github_repository


class GitHubSteps:
    """The three GitHub steps of a provisioning request."""

    def __init__(
        self,
        github_factory: GitHubServiceFactory,
        openshift_factory: OpenShiftServiceFactory,
        cluster_registry: OpenShiftClusterRegistry,
        emitter: StatusEmitter,
    ) -> None:
        self._github_factory = github_factory
        self._openshift_factory = openshift_factory
        self._cluster_registry = cluster_registry
        self._emitter = emitter

    def _github_service(self, state: ProvisioningState) -> GitService:
        return self._github_factory.create(state.projectile.github_identity)

    def create_github_repository(self, state: ProvisioningState) -> None:
        """Create the remote repository and record it on ``state``.

        Raises:
            ProvisioningStateError: If a repository is already set.
        """
        if state.github_repository is not None:
            raise ProvisioningStateError(
                "GitHub repository is already set",
                step=StatusEventType.GITHUB_CREATE.value,
            )

        projectile = state.projectile
        service = self._github_service(state)
        repository = service.create_repository(
            projectile.repository_name, projectile.github_repository_description
        )
        state.github_repository = repository
        self._emitter.emit(
            StatusMessageEvent(
                projectile.id,
                StatusEventType.GITHUB_CREATE,
                {"location": repository.homepage},
            )
        )

    def push_to_github_repository(self, state: ProvisioningState) -> None:
        """Fill in README variables and push the generated project.

        README substitution is best effort: failures are logged and the
        push goes ahead.

        Raises:
            ProvisioningStateError: If no repository is set.
        """
        repository = _require_repository(state, StatusEventType.GITHUB_PUSHED)

        projectile = state.projectile
        service = self._github_service(state)
        project_location = projectile.project_location

        readme_path = project_location / README_FILENAME
        if readme_path.is_file():
            try:
                values = {LOGGED_USER_VARIABLE: service.get_logged_user().login}
                replace_file_variables(readme_path, values)
            except (OSError, UnicodeError, GitHubError):
                logger.error(
                    "readme_substitution_failed", path=str(readme_path), exc_info=True
                )

        service.push(repository, project_location)
        self._emitter.emit(
            StatusMessageEvent(projectile.id, StatusEventType.GITHUB_PUSHED)
        )

    def create_webhooks(self, state: ProvisioningState) -> None:
        """Register a GitHub webhook for every build webhook of the project.

        An existing hook for the same URL is looked up and reused. If that
        lookup finds nothing, the URL is left out of ``state.webhooks``.

        Raises:
            ProvisioningStateError: If no repository is set.
            ClusterNotFoundError: If the cluster isn't in the registry.
            ProjectNotFoundError: If the deployment project doesn't exist.
        """
        repository = _require_repository(state, StatusEventType.GITHUB_WEBHOOK)

        projectile = state.projectile
        cluster = self._cluster_registry.find_cluster_by_id(
            projectile.openshift_cluster_name
        )
        if cluster is None:
            raise ClusterNotFoundError(projectile.openshift_cluster_name)
        openshift = self._openshift_factory.create(
            cluster, projectile.openshift_identity
        )
        project = openshift.find_project(projectile.openshift_project_name)
        if project is None:
            raise ProjectNotFoundError(projectile.openshift_project_name)

        service = self._github_service(state)
        webhooks: list[GitHook] = []
        for webhook_url in openshift.get_webhook_urls(project):
            hook: GitHook | None
            try:
                hook = service.create_hook(repository, webhook_url, *WEBHOOK_EVENTS)
            except DuplicateHookError as e:
                logger.debug("webhook_exists", url=webhook_url, reason=e.message)
                hook = service.get_webhook(repository, webhook_url)
                if hook is None:
                    logger.warning("webhook_lookup_failed", url=webhook_url)
            if hook is not None:
                webhooks.append(hook)

        state.webhooks = webhooks
        self._emitter.emit(
            StatusMessageEvent(projectile.id, StatusEventType.GITHUB_WEBHOOK)
        )
