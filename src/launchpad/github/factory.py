"""Per-identity construction of GitHub services."""

from __future__ import annotations

from github import Auth, Github

from launchpad.config import GitHubConfig
from launchpad.exceptions import GitHubAuthError
from launchpad.github.service import GitHubService, GitService
from launchpad.identity import Identity, TokenIdentity, UserPasswordIdentity

__all__ = ["GitHubServiceFactory", "create_github_service"]


def create_github_service(
    identity: Identity, config: GitHubConfig | None = None
) -> GitHubService:
    """Create a :class:`GitHubService` authenticated as ``identity``.

    Args:
        identity: Token or username/password credentials.
        config: GitHub settings (API URL, branch, commit author).

    Returns:
        A service bound to ``identity``.
    """
    config = config or GitHubConfig()
    auth: Auth.Auth
    if isinstance(identity, TokenIdentity):
        auth = Auth.Token(identity.token)
    elif isinstance(identity, UserPasswordIdentity):
        auth = Auth.Login(identity.username, identity.password)
    else:
        raise TypeError(f"Unsupported identity type: {type(identity).__name__}")
    github = Github(auth=auth, base_url=config.api_url)
    return GitHubService(github, identity, config)


class GitHubServiceFactory:
    """Builds a :class:`GitService` per identity.

    When no identity is passed, the token from ``github.token`` in the
    configuration is used.
    """

    def __init__(self, config: GitHubConfig | None = None) -> None:
        self._config = config or GitHubConfig()

    def default_identity(self) -> Identity:
        if not self._config.token:
            raise GitHubAuthError()
        return TokenIdentity(self._config.token)

    def create(self, identity: Identity | None = None) -> GitService:
        return create_github_service(identity or self.default_identity(), self._config)
