"""OpenShift REST client.

Only the two calls the provisioning steps need are implemented: project
lookup and enumeration of GitHub build webhook URLs.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from launchpad.exceptions import OpenShiftError
from launchpad.identity import Identity, TokenIdentity
from launchpad.logging import get_logger
from launchpad.openshift.models import OpenShiftCluster, OpenShiftProject

__all__ = ["HttpOpenShiftService", "OpenShiftService"]

logger = get_logger(__name__)

_PROJECTS_PATH = "/apis/project.openshift.io/v1/projects"
_BUILD_CONFIGS_PATH = "/apis/build.openshift.io/v1/namespaces/{namespace}/buildconfigs"


@runtime_checkable
class OpenShiftService(Protocol):
    """Deployment-platform operations used by the provisioning steps."""

    def find_project(self, name: str) -> OpenShiftProject | None:
        """Return the project or None if it doesn't exist or isn't visible."""
        ...

    def get_webhook_urls(self, project: OpenShiftProject) -> list[str]:
        """Return the GitHub webhook URLs of the project's build configs."""
        ...


class HttpOpenShiftService:
    """:class:`OpenShiftService` backed by the OpenShift REST API via httpx.

    Attributes:
        cluster: Cluster the service talks to.
    """

    def __init__(
        self,
        cluster: OpenShiftCluster,
        identity: Identity,
        *,
        verify_ssl: bool = True,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.cluster = cluster
        self._identity = identity
        self._verify_ssl = verify_ssl
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        headers = {"Accept": "application/json"}
        auth: httpx.BasicAuth | None = None
        if isinstance(self._identity, TokenIdentity):
            headers["Authorization"] = f"Bearer {self._identity.token}"
        else:
            auth = httpx.BasicAuth(self._identity.username, self._identity.password)
        return httpx.Client(
            base_url=self.cluster.api_url.rstrip("/"),
            headers=headers,
            auth=auth,
            verify=self._verify_ssl,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _get_json(self, path: str) -> dict[str, Any] | None:
        """GET ``path``; None on 403/404, OpenShiftError on other failures."""
        try:
            with self._client() as client:
                response = client.get(path)
        except httpx.HTTPError as e:
            raise OpenShiftError(
                f"OpenShift request to {self.cluster.api_url}{path} failed: {e}"
            ) from e

        # OpenShift answers 403 for projects the identity cannot see.
        if response.status_code in (403, 404):
            return None
        try:
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise OpenShiftError(
                f"OpenShift API error {response.status_code} for {path}: {response.text}",
                status_code=response.status_code,
            ) from e
        except ValueError as e:
            raise OpenShiftError(f"Invalid JSON from OpenShift for {path}") from e

    def find_project(self, name: str) -> OpenShiftProject | None:
        data = self._get_json(f"{_PROJECTS_PATH}/{quote(name, safe='')}")
        if data is None:
            logger.debug("openshift_project_not_found", project=name)
            return None
        project_name = data.get("metadata", {}).get("name", name)
        return OpenShiftProject(
            name=project_name,
            console_overview_url=self._console_overview_url(project_name),
        )

    def get_webhook_urls(self, project: OpenShiftProject) -> list[str]:
        namespace = quote(project.name, safe="")
        path = _BUILD_CONFIGS_PATH.format(namespace=namespace)
        data = self._get_json(path)
        if data is None:
            raise OpenShiftError(
                f"Cannot list build configs of project '{project.name}'"
            )

        urls: list[str] = []
        api_url = self.cluster.api_url.rstrip("/")
        for item in data.get("items") or []:
            bc_name = item.get("metadata", {}).get("name")
            for trigger in item.get("spec", {}).get("triggers") or []:
                if trigger.get("type") != "GitHub":
                    continue
                secret = (trigger.get("github") or {}).get("secret")
                if not bc_name or not secret:
                    continue
                urls.append(
                    f"{api_url}{path}/{quote(bc_name, safe='')}"
                    f"/webhooks/{quote(secret, safe='')}/github"
                )
        logger.debug("openshift_webhook_urls", project=project.name, count=len(urls))
        return urls

    def _console_overview_url(self, project_name: str) -> str | None:
        if not self.cluster.console_url:
            return None
        return f"{self.cluster.console_url.rstrip('/')}/console/project/{project_name}/overview"
