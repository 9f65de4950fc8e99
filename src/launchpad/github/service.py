"""GitHub service using PyGithub.

Wraps the handful of GitHub operations provisioning needs and converts
PyGithub exceptions into the Launchpad hierarchy at this seam.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from urllib.parse import quote, urlsplit, urlunsplit

from github import Github, GithubException

from launchpad.config import GitHubConfig
from launchpad.exceptions import DuplicateHookError, GitHubAuthError, GitHubError
from launchpad.git import GitRepository
from launchpad.github.models import GitHook, GitHubRepository, GitUser
from launchpad.identity import Identity, TokenIdentity
from launchpad.logging import get_logger

__all__ = ["GitHubService", "GitService"]

logger = get_logger(__name__)

_HOOK_NAME = "web"


@runtime_checkable
class GitService(Protocol):
    """Repository-host operations used by the provisioning steps."""

    def get_logged_user(self) -> GitUser: ...

    def create_repository(
        self, name: str, description: str | None = None
    ) -> GitHubRepository: ...

    def push(self, repository: GitHubRepository, path: Path) -> None: ...

    def create_hook(
        self, repository: GitHubRepository, url: str, *events: str
    ) -> GitHook: ...

    def get_webhook(self, repository: GitHubRepository, url: str) -> GitHook | None: ...


def _is_duplicate_hook(e: GithubException) -> bool:
    return e.status == 422 and "already exists" in str(e.data).lower()


def _convert_github_error(e: GithubException, action: str) -> GitHubError:
    """Convert a PyGithub exception to a Launchpad exception."""
    if e.status == 401:
        return GitHubAuthError(f"GitHub rejected the credentials while trying to {action}")
    return GitHubError(f"Failed to {action}: {e}", status_code=e.status)


class GitHubService:
    """:class:`GitService` bound to one GitHub identity.

    Attributes:
        github: The underlying PyGithub client instance.
    """

    def __init__(
        self,
        github: Github,
        identity: Identity,
        config: GitHubConfig | None = None,
    ) -> None:
        self.github = github
        self._identity = identity
        self._config = config or GitHubConfig()

    # =========================================================================
    # User and repository operations
    # =========================================================================

    def get_logged_user(self) -> GitUser:
        try:
            user = self.github.get_user()
            return GitUser(login=user.login, email=user.email)
        except GithubException as e:
            raise _convert_github_error(e, "fetch the authenticated user") from e

    def create_repository(
        self, name: str, description: str | None = None
    ) -> GitHubRepository:
        """Create a repository owned by the authenticated user.

        Raises:
            GitHubError: On API errors (including an existing repository).
        """
        try:
            repo = self.github.get_user().create_repo(name, description=description or "")
        except GithubException as e:
            raise _convert_github_error(e, f"create repository '{name}'") from e
        logger.info("github_repository_created", repository=repo.full_name)
        return _to_repository(repo)

    def get_repository(self, full_name: str) -> GitHubRepository | None:
        try:
            return _to_repository(self.github.get_repo(full_name))
        except GithubException as e:
            if e.status == 404:
                return None
            raise _convert_github_error(e, f"get repository '{full_name}'") from e

    def push(self, repository: GitHubRepository, path: Path) -> None:
        """Commit everything under ``path`` and push it to ``repository``.

        The directory is turned into a git working tree if it isn't one.

        Raises:
            GitError: If committing or pushing fails.
        """
        repo = GitRepository.init(path)
        repo.add_all()
        if repo.has_staged_changes():
            repo.commit(
                self._config.commit_message,
                author_name=self._config.author_name,
                author_email=self._config.author_email,
            )
        else:
            logger.debug("push_nothing_to_commit", path=str(path))
        repo.checkout_branch(self._config.default_branch)
        # Credentials live in the remote URL only while pushing.
        repo.set_remote("origin", self._authenticated_url(repository.git_clone_uri))
        try:
            repo.push("origin", self._config.default_branch, set_upstream=True)
        finally:
            repo.set_remote("origin", repository.git_clone_uri)
        logger.info(
            "github_repository_pushed",
            repository=repository.full_name,
            branch=self._config.default_branch,
        )

    # =========================================================================
    # Webhook operations
    # =========================================================================

    def create_hook(
        self, repository: GitHubRepository, url: str, *events: str
    ) -> GitHook:
        """Register a JSON webhook on ``repository``.

        Raises:
            DuplicateHookError: If a hook for ``url`` already exists.
            GitHubError: On other API errors.
        """
        config = {"url": url, "content_type": "json", "insecure_ssl": "0"}
        try:
            gh_repo = self.github.get_repo(repository.full_name)
            hook = gh_repo.create_hook(_HOOK_NAME, config, events=list(events), active=True)
        except GithubException as e:
            if _is_duplicate_hook(e):
                raise DuplicateHookError(url, repository.full_name) from e
            raise _convert_github_error(e, f"create webhook on {repository.full_name}") from e
        logger.info("github_webhook_created", repository=repository.full_name, url=url)
        return _to_hook(hook, default_url=url)

    def get_webhook(self, repository: GitHubRepository, url: str) -> GitHook | None:
        """Find the hook on ``repository`` whose target is ``url``."""
        try:
            for hook in self.github.get_repo(repository.full_name).get_hooks():
                if (hook.config or {}).get("url") == url:
                    return _to_hook(hook, default_url=url)
        except GithubException as e:
            raise _convert_github_error(e, f"list webhooks of {repository.full_name}") from e
        return None

    def _authenticated_url(self, clone_url: str) -> str:
        parts = urlsplit(clone_url)
        if isinstance(self._identity, TokenIdentity):
            userinfo = f"x-access-token:{quote(self._identity.token, safe='')}"
        else:
            userinfo = (
                f"{quote(self._identity.username, safe='')}"
                f":{quote(self._identity.password, safe='')}"
            )
        host = parts.hostname or ""
        if parts.port:
            host = f"{host}:{parts.port}"
        return urlunsplit(
            (parts.scheme, f"{userinfo}@{host}", parts.path, parts.query, parts.fragment)
        )


def _to_repository(repo: Any) -> GitHubRepository:
    return GitHubRepository(
        full_name=repo.full_name,
        homepage=repo.html_url,
        git_clone_uri=repo.clone_url,
    )


def _to_hook(hook: Any, default_url: str) -> GitHook:
    return GitHook(
        name=hook.name,
        url=(hook.config or {}).get("url", default_url),
        events=tuple(hook.events or ()),
    )
