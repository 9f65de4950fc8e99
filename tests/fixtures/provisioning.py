"""In-memory collaborators for provisioning step tests.

Provides:
- FakeGitService: records calls, can simulate duplicate hooks
- FakeOpenShiftService: serves a fixed project and webhook URLs
- github_steps fixture wired to both fakes and a recording emitter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from launchpad.exceptions import DuplicateHookError
from launchpad.github import GitHook, GitHubRepository, GitUser
from launchpad.openshift import OpenShiftClusterRegistry, OpenShiftProject
from launchpad.provisioning import (
    CreateProjectile,
    GitHubSteps,
    ProvisioningState,
    StatusEmitter,
    StatusMessageEvent,
)

WEBHOOK_URLS = [
    "https://api.starter.example.com/apis/build.openshift.io/v1/namespaces/demo/buildconfigs/demo/webhooks/s3cr3t/github",
    "https://api.starter.example.com/apis/build.openshift.io/v1/namespaces/demo/buildconfigs/demo-pipeline/webhooks/t0ken/github",
]


@dataclass
class FakeGitService:
    """GitService double recording every call."""

    login: str = "octocat"
    existing_hooks: dict[str, GitHook] = field(default_factory=dict)
    duplicate_urls: set[str] = field(default_factory=set)
    created: list[tuple[str, str | None]] = field(default_factory=list)
    pushed: list[tuple[GitHubRepository, Path]] = field(default_factory=list)
    hook_calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)
    lookups: list[str] = field(default_factory=list)

    def get_logged_user(self) -> GitUser:
        return GitUser(login=self.login)

    def create_repository(
        self, name: str, description: str | None = None
    ) -> GitHubRepository:
        self.created.append((name, description))
        return GitHubRepository(
            full_name=f"{self.login}/{name}",
            homepage=f"https://github.com/{self.login}/{name}",
            git_clone_uri=f"https://github.com/{self.login}/{name}.git",
        )

    def push(self, repository: GitHubRepository, path: Path) -> None:
        self.pushed.append((repository, path))

    def create_hook(self, repository: GitHubRepository, url: str, *events: str) -> GitHook:
        self.hook_calls.append((url, events))
        if url in self.duplicate_urls:
            raise DuplicateHookError(url, repository.full_name)
        return GitHook(name="web", url=url, events=events)

    def get_webhook(self, repository: GitHubRepository, url: str) -> GitHook | None:
        self.lookups.append(url)
        return self.existing_hooks.get(url)


@dataclass
class FakeOpenShiftService:
    projects: dict[str, OpenShiftProject] = field(
        default_factory=lambda: {"demo": OpenShiftProject(name="demo")}
    )
    webhook_urls: list[str] = field(default_factory=lambda: list(WEBHOOK_URLS))

    def find_project(self, name: str) -> OpenShiftProject | None:
        return self.projects.get(name)

    def get_webhook_urls(self, project: OpenShiftProject) -> list[str]:
        return list(self.webhook_urls)


@pytest.fixture
def git_service() -> FakeGitService:
    return FakeGitService()


@pytest.fixture
def openshift_service() -> FakeOpenShiftService:
    return FakeOpenShiftService()


@pytest.fixture
def status_events() -> list[StatusMessageEvent]:
    return []


@pytest.fixture
def github_factory(git_service: FakeGitService) -> MagicMock:
    factory = MagicMock()
    factory.create.return_value = git_service
    return factory


@pytest.fixture
def openshift_factory(openshift_service: FakeOpenShiftService) -> MagicMock:
    factory = MagicMock()
    factory.create.return_value = openshift_service
    return factory


@pytest.fixture
def github_steps(
    github_factory: MagicMock,
    openshift_factory: MagicMock,
    cluster_registry: OpenShiftClusterRegistry,
    status_events: list[StatusMessageEvent],
) -> GitHubSteps:
    return GitHubSteps(
        github_factory=github_factory,
        openshift_factory=openshift_factory,
        cluster_registry=cluster_registry,
        emitter=StatusEmitter(status_events.append),
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A generated project with a README.adoc using ${loggedUser}."""
    project = tmp_path / "demo"
    project.mkdir()
    (project / "README.adoc").write_text(
        "= Demo\n\nCreated by ${loggedUser} with ${generator}.\n"
    )
    (project / "pom.xml").write_text("<project/>\n")
    return project


@pytest.fixture
def projectile(project_dir: Path) -> CreateProjectile:
    return CreateProjectile(
        project_location=project_dir,
        openshift_project_name="demo",
        openshift_cluster_name="starter-us-east-1",
        github_repository_description="Demo booster",
        id="projectile-1",
    )


@pytest.fixture
def state(projectile: CreateProjectile) -> ProvisioningState:
    return ProvisioningState(projectile=projectile)
