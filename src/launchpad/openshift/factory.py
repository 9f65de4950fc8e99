from __future__ import annotations

from launchpad.config import OpenShiftConfig
from launchpad.exceptions import OpenShiftError
from launchpad.identity import Identity, TokenIdentity
from launchpad.openshift.models import OpenShiftCluster
from launchpad.openshift.service import HttpOpenShiftService, OpenShiftService

__all__ = ["OpenShiftServiceFactory"]


class OpenShiftServiceFactory:
    """Builds an :class:`OpenShiftService` per (cluster, identity) pair.

    When no identity is passed, the token from ``openshift.token`` in the
    configuration is used.
    """

    def __init__(self, config: OpenShiftConfig | None = None) -> None:
        self._config = config or OpenShiftConfig()

    def default_identity(self) -> Identity:
        if not self._config.token:
            raise OpenShiftError(
                "No OpenShift credentials. Set LAUNCHPAD_OPENSHIFT__TOKEN "
                "or configure openshift.token."
            )
        return TokenIdentity(self._config.token)

    def create(
        self, cluster: OpenShiftCluster, identity: Identity | None = None
    ) -> OpenShiftService:
        return HttpOpenShiftService(
            cluster,
            identity or self.default_identity(),
            verify_ssl=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
        )
