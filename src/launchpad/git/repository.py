"""GitPython-based repository operations for Launchpad.

Only what the initial import of generated content needs: open or
initialise a working tree, stage and commit everything, point a remote at
the new hosted repository and push.

Example:
    ```python
    from launchpad.git import GitRepository

    repo = GitRepository.init("/tmp/generated-app")
    repo.commit("Initial import", add_all=True)
    repo.checkout_branch("main")
    repo.set_remote("origin", "https://github.com/acme/demo.git")
    repo.push("origin", "main", set_upstream=True)
    ```
"""

from __future__ import annotations

from pathlib import Path

from git import Actor, GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import GitCommandNotFound
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from launchpad.exceptions import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    NothingToCommitError,
    PushRejectedError,
)
from launchpad.logging import get_logger

logger = get_logger(__name__)

__all__ = ["GitRepository", "is_network_error"]

#: Maximum attempts for network operations
MAX_NETWORK_RETRIES: int = 3

_NETWORK_ERROR_PATTERNS: tuple[str, ...] = (
    "could not resolve host",
    "connection refused",
    "connection timed out",
    "network unreachable",
    "temporary failure",
    "unable to access",
    "ssl",
    "tls",
)


def is_network_error(exc: BaseException) -> bool:
    """Check if exception is a network-related git error that should be retried."""
    if not isinstance(exc, GitCommandError):
        return False
    stderr = str(exc.stderr or "").lower()
    return any(pattern in stderr for pattern in _NETWORK_ERROR_PATTERNS)


network_retry = retry(
    retry=retry_if_exception(is_network_error),
    stop=stop_after_attempt(MAX_NETWORK_RETRIES),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    reraise=True,
)


def _convert_git_error(exc: GitCommandError, operation: str) -> GitError:
    """Convert a GitPython exception to a Launchpad exception."""
    stderr = str(exc.stderr or exc.stdout or str(exc))
    stderr_lower = stderr.lower()

    if "nothing to commit" in stderr_lower:
        return NothingToCommitError()
    if "rejected" in stderr_lower or "failed to push" in stderr_lower:
        return PushRejectedError(f"Push rejected: {stderr.strip()}", reason=stderr)
    return GitError(
        f"git {operation} failed: {stderr.strip()}",
        operation=operation,
        recoverable=is_network_error(exc),
    )


class GitRepository:
    """GitPython-based repository operations.

    Example:
        ```python
        repo = GitRepository("/path/to/repo")
        repo.commit("Add feature", add_all=True)
        repo.push(set_upstream=True)
        ```
    """

    def __init__(self, path: Path | str) -> None:
        """Open an existing repository.

        Raises:
            GitNotFoundError: If git is not installed.
            NotARepositoryError: If path is not a git repository.
        """
        self._path = Path(path)
        try:
            self._repo = Repo(self._path)
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotARepositoryError(
                f"Not a git repository: {path}", path=path
            ) from e

    @classmethod
    def init(cls, path: Path | str) -> GitRepository:
        """Open the repository at ``path``, initialising it if needed."""
        path = Path(path)
        if not (path / ".git").exists():
            try:
                Repo.init(path)
            except GitCommandNotFound as e:
                raise GitNotFoundError("Git CLI not found. Please install git.") from e
            except GitCommandError as e:
                raise _convert_git_error(e, "init") from e
            logger.debug("git_repository_initialized", path=str(path))
        return cls(path)

    @property
    def path(self) -> Path:
        return self._path

    def current_branch(self) -> str:
        """Return the current branch name."""
        return self._repo.active_branch.name

    def add_all(self) -> None:
        """Stage all changes, including untracked files."""
        try:
            self._repo.git.add("-A")
        except GitCommandError as e:
            raise _convert_git_error(e, "add") from e

    def has_staged_changes(self) -> bool:
        if not self._repo.head.is_valid():
            # Unborn branch: anything in the index is new.
            return bool(self._repo.index.entries)
        return self._repo.is_dirty(index=True, working_tree=False)

    def commit(
        self,
        message: str,
        add_all: bool = False,
        author_name: str | None = None,
        author_email: str | None = None,
    ) -> str:
        """Create a commit.

        Args:
            message: Commit message.
            add_all: If True, stage all changes before committing.
            author_name: Author/committer name; git config is used when None.
            author_email: Author/committer email; git config is used when None.

        Returns:
            The commit SHA.

        Raises:
            NothingToCommitError: If nothing is staged.
        """
        if add_all:
            self.add_all()
        if not self.has_staged_changes():
            raise NothingToCommitError("Nothing to commit")

        actor = (
            Actor(author_name, author_email)
            if author_name and author_email
            else None
        )
        try:
            commit = self._repo.index.commit(message, author=actor, committer=actor)
        except GitCommandError as e:
            raise _convert_git_error(e, "commit") from e
        logger.info("commit_created", sha=commit.hexsha[:7])
        return commit.hexsha

    def checkout_branch(self, name: str) -> None:
        """Create or reset branch ``name`` at HEAD and check it out."""
        try:
            self._repo.git.checkout("-B", name)
        except GitCommandError as e:
            raise _convert_git_error(e, "checkout") from e

    def set_remote(self, name: str, url: str) -> None:
        """Create remote ``name`` or repoint it at ``url``."""
        try:
            if name in [remote.name for remote in self._repo.remotes]:
                self._repo.remote(name).set_url(url)
            else:
                self._repo.create_remote(name, url)
        except GitCommandError as e:
            raise _convert_git_error(e, "remote") from e

    def get_remote_url(self, remote: str = "origin") -> str | None:
        try:
            return self._repo.remote(remote).url
        except ValueError:
            return None

    def push(
        self,
        remote: str = "origin",
        branch: str | None = None,
        force: bool = False,
        set_upstream: bool = False,
    ) -> None:
        """Push commits to remote, retrying transient network failures.

        Args:
            remote: Remote name (default: origin).
            branch: Branch to push (default: current branch).
            force: Force push.
            set_upstream: Set upstream tracking branch.

        Raises:
            PushRejectedError: If remote rejects the push.
            GitError: On other git failures, after retries for network errors.
        """
        branch_name = branch or self.current_branch()

        args: list[str] = []
        if set_upstream:
            args.append("-u")
        if force:
            args.append("--force")
        args.extend([remote, branch_name])

        try:
            self._push(args)
        except GitCommandError as e:
            raise _convert_git_error(e, "push") from e
        logger.info("push_completed", remote=remote, branch=branch_name)

    @network_retry
    def _push(self, args: list[str]) -> None:
        self._repo.git.push(*args)
