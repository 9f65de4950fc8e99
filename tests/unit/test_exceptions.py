"""Tests for the Launchpad exception hierarchy."""

from __future__ import annotations

import pytest

from launchpad.exceptions import (
    CatalogError,
    ClusterNotFoundError,
    ConfigError,
    DuplicateHookError,
    GitError,
    GitHubAuthError,
    GitHubError,
    GitNotFoundError,
    LaunchpadError,
    NotARepositoryError,
    NothingToCommitError,
    OpenShiftError,
    ProjectNotFoundError,
    ProvisioningStateError,
    PushRejectedError,
)


@pytest.mark.parametrize(
    ("exc", "parent"),
    [
        (CatalogError("x"), LaunchpadError),
        (ConfigError("x"), LaunchpadError),
        (ProvisioningStateError("x"), LaunchpadError),
        (ClusterNotFoundError("c"), OpenShiftError),
        (ProjectNotFoundError("p"), OpenShiftError),
        (GitHubAuthError(), GitHubError),
        (DuplicateHookError("https://hook"), GitHubError),
        (PushRejectedError("x"), GitError),
        (NothingToCommitError(), GitError),
        (NotARepositoryError("x"), GitError),
        (GitNotFoundError(), GitError),
        (OpenShiftError("x"), LaunchpadError),
        (GitHubError("x"), LaunchpadError),
        (GitError("x"), LaunchpadError),
    ],
)
def test_hierarchy(exc: LaunchpadError, parent: type[Exception]) -> None:
    assert isinstance(exc, parent)
    assert str(exc) == exc.message


def test_config_error_attributes() -> None:
    error = ConfigError("bad", field="openshift.timeout_seconds", value=0)
    assert error.field == "openshift.timeout_seconds"
    assert error.value == 0


def test_duplicate_hook_error() -> None:
    error = DuplicateHookError("https://hook", "octocat/demo")
    assert error.status_code == 422
    assert error.url == "https://hook"
    assert "octocat/demo" in error.message


def test_github_auth_error_default_message() -> None:
    error = GitHubAuthError()
    assert error.status_code == 401
    assert "LAUNCHPAD_GITHUB__TOKEN" in error.message


def test_not_found_errors_name_the_target() -> None:
    assert ClusterNotFoundError("starter").cluster_id == "starter"
    assert "'starter'" in ClusterNotFoundError("starter").message
    assert ProjectNotFoundError("demo").project_name == "demo"


def test_git_error_defaults() -> None:
    error = PushRejectedError("Push rejected", reason="non-fast-forward")
    assert error.operation == "push"
    assert error.recoverable is False
    assert error.reason == "non-fast-forward"


def test_provisioning_state_error_step() -> None:
    error = ProvisioningStateError("GitHub repository is not set", step="GITHUB_PUSHED")
    assert error.step == "GITHUB_PUSHED"
