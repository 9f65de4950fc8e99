from __future__ import annotations

from dataclasses import dataclass

__all__ = ["OpenShiftCluster", "OpenShiftProject"]


@dataclass(frozen=True, slots=True)
class OpenShiftCluster:
    """A deployment cluster known to the registry.

    Attributes:
        id: Registry identifier (e.g. ``starter-us-east-1``).
        api_url: Base URL of the cluster API server.
        console_url: Base URL of the web console.
        type: Cluster type matched against booster ``runsOn`` metadata.
    """

    id: str
    api_url: str
    console_url: str | None = None
    type: str | None = None


@dataclass(frozen=True, slots=True)
class OpenShiftProject:
    """A project (namespace) on an OpenShift cluster."""

    name: str
    console_overview_url: str | None = None
