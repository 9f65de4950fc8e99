"""Ordered execution of the provisioning steps.

Example:
    ```python
    config = load_config()
    emitter = StatusEmitter(log_status_event)
    pipeline = create_pipeline(config, emitter)
    state = pipeline.run(
        CreateProjectile(project_location=Path("demo"), openshift_project_name="demo")
    )
    print(state.github_repository.homepage)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from launchpad.config import LaunchpadConfig
from launchpad.github import GitHubServiceFactory
from launchpad.logging import bound_context, get_logger
from launchpad.openshift import OpenShiftClusterRegistry, OpenShiftServiceFactory
from launchpad.provisioning.events import StatusEmitter, StatusEventType
from launchpad.provisioning.github_steps import GitHubSteps
from launchpad.provisioning.projectile import CreateProjectile, ProvisioningState

__all__ = ["ProvisioningPipeline", "Step", "create_pipeline"]

logger = get_logger(__name__)

Step = Callable[[ProvisioningState], None]


class ProvisioningPipeline:
    """Runs steps one after the other for a single request.

    The first failing step aborts the request; steps already completed are
    not rolled back.
    """

    def __init__(self, steps: Sequence[tuple[StatusEventType, Step]]) -> None:
        self._steps = tuple(steps)
        types = [step_type for step_type, _ in self._steps]
        if len(set(types)) != len(types):
            raise ValueError("Each step type may appear only once")

    @classmethod
    def from_github_steps(cls, github_steps: GitHubSteps) -> ProvisioningPipeline:
        return cls(
            [
                (StatusEventType.GITHUB_CREATE, github_steps.create_github_repository),
                (StatusEventType.GITHUB_PUSHED, github_steps.push_to_github_repository),
                (StatusEventType.GITHUB_WEBHOOK, github_steps.create_webhooks),
            ]
        )

    @property
    def step_types(self) -> list[StatusEventType]:
        return [step_type for step_type, _ in self._steps]

    def run(self, projectile: CreateProjectile) -> ProvisioningState:
        """Run every step in order and return the accumulated state."""
        state = ProvisioningState(projectile=projectile)
        with bound_context(projectile_id=projectile.id):
            for step_type, _ in self._steps:
                self.run_step(step_type, state)
        logger.info(
            "provisioning_completed",
            projectile_id=projectile.id,
            webhooks=len(state.webhooks),
        )
        return state

    def run_step(self, step_type: StatusEventType, state: ProvisioningState) -> None:
        """Run the single step registered for ``step_type``.

        Raises:
            KeyError: If no step is registered for ``step_type``.
        """
        step = dict(self._steps)[step_type]
        log = logger.bind(step=step_type.value)
        log.debug("step_started")
        try:
            step(state)
        except Exception:
            log.error("step_failed", exc_info=True)
            raise
        log.debug("step_completed")


def create_pipeline(
    config: LaunchpadConfig, emitter: StatusEmitter
) -> ProvisioningPipeline:
    """Wire the GitHub steps from configuration."""
    github_steps = GitHubSteps(
        github_factory=GitHubServiceFactory(config.github),
        openshift_factory=OpenShiftServiceFactory(config.openshift),
        cluster_registry=OpenShiftClusterRegistry.from_config(config.openshift),
        emitter=emitter,
    )
    return ProvisioningPipeline.from_github_steps(github_steps)
