"""Typed selections shared between wizard steps."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from launchpad.catalog import Mission, Runtime

__all__ = ["DeploymentType", "ValidationMessage", "WizardSelection"]


class DeploymentType(str, Enum):
    """How the generated project is delivered.

    Values:
        CD: Continuous delivery onto an OpenShift cluster.
        ZIP: Download of the generated sources only.
    """

    CD = "cd"
    ZIP = "zip"


@dataclass(frozen=True, slots=True)
class WizardSelection:
    """Choices collected by the wizard so far.

    Attributes:
        mission: Chosen mission, if any.
        deployment_type: Delivery mode; None until chosen.
        openshift_cluster: Id of the target cluster for CD deployments.
        runtime: Chosen runtime, if any.
    """

    mission: Mission | None = None
    deployment_type: DeploymentType | None = None
    openshift_cluster: str | None = None
    runtime: Runtime | None = None

    def with_runtime(self, runtime: Runtime | None) -> WizardSelection:
        return replace(self, runtime=runtime)


@dataclass(frozen=True, slots=True)
class ValidationMessage:
    """A validation error reported against one wizard input."""

    input_name: str
    message: str

    def __str__(self) -> str:
        return self.message
