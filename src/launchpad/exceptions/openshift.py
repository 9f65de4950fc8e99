from __future__ import annotations

from launchpad.exceptions.base import LaunchpadError


class OpenShiftError(LaunchpadError):
    """Exception for OpenShift API failures.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status returned by the API (if applicable).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ClusterNotFoundError(OpenShiftError):
    """The requested OpenShift cluster is not known to the registry.

    Attributes:
        cluster_id: Identifier that was looked up.
    """

    def __init__(self, cluster_id: str | None) -> None:
        self.cluster_id = cluster_id
        super().__init__(f"OpenShift cluster '{cluster_id}' was not found")


class ProjectNotFoundError(OpenShiftError):
    """The deployment project does not exist on the OpenShift cluster.

    Attributes:
        project_name: Name of the missing project.
    """

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f"OpenShift project '{project_name}' was not found")
