from __future__ import annotations

from collections.abc import Iterable

from launchpad.config import OpenShiftConfig
from launchpad.openshift.models import OpenShiftCluster

__all__ = ["OpenShiftClusterRegistry"]


class OpenShiftClusterRegistry:
    """Lookup of configured OpenShift clusters by id."""

    def __init__(self, clusters: Iterable[OpenShiftCluster] = ()) -> None:
        self._clusters = {cluster.id: cluster for cluster in clusters}

    @classmethod
    def from_config(cls, config: OpenShiftConfig) -> OpenShiftClusterRegistry:
        return cls(
            OpenShiftCluster(
                id=c.id,
                api_url=c.api_url,
                console_url=c.console_url,
                type=c.type,
            )
            for c in config.clusters
        )

    @property
    def clusters(self) -> list[OpenShiftCluster]:
        return list(self._clusters.values())

    def find_cluster_by_id(self, cluster_id: str | None) -> OpenShiftCluster | None:
        if cluster_id is None:
            return None
        return self._clusters.get(cluster_id)
