"""OpenShift deployment-platform collaborators."""

from __future__ import annotations

from launchpad.openshift.factory import OpenShiftServiceFactory
from launchpad.openshift.models import OpenShiftCluster, OpenShiftProject
from launchpad.openshift.registry import OpenShiftClusterRegistry
from launchpad.openshift.service import HttpOpenShiftService, OpenShiftService

__all__ = [
    "HttpOpenShiftService",
    "OpenShiftCluster",
    "OpenShiftClusterRegistry",
    "OpenShiftProject",
    "OpenShiftService",
    "OpenShiftServiceFactory",
]
