"""Tests for OpenShiftClusterRegistry."""

from __future__ import annotations

from launchpad.config import ClusterConfig, OpenShiftConfig
from launchpad.openshift import OpenShiftCluster, OpenShiftClusterRegistry


def test_from_config_preserves_order() -> None:
    config = OpenShiftConfig(
        clusters=[
            ClusterConfig(id="b", api_url="https://api.b", type="pro"),
            ClusterConfig(id="a", api_url="https://api.a", console_url="https://console.a"),
        ]
    )

    registry = OpenShiftClusterRegistry.from_config(config)

    assert [c.id for c in registry.clusters] == ["b", "a"]
    assert registry.find_cluster_by_id("a") == OpenShiftCluster(
        id="a", api_url="https://api.a", console_url="https://console.a"
    )


def test_find_unknown_or_none(cluster_registry: OpenShiftClusterRegistry) -> None:
    assert cluster_registry.find_cluster_by_id("nowhere") is None
    assert cluster_registry.find_cluster_by_id(None) is None


def test_find_known(cluster_registry: OpenShiftClusterRegistry) -> None:
    cluster = cluster_registry.find_cluster_by_id("pro-eu-west-1")
    assert cluster is not None
    assert cluster.type == "pro"


def test_empty_registry() -> None:
    assert OpenShiftClusterRegistry().clusters == []
