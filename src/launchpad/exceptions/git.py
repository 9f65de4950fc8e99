from __future__ import annotations

from pathlib import Path

from launchpad.exceptions.base import LaunchpadError


class GitError(LaunchpadError):
    """Exception for git operation failures.

    Attributes:
        message: Human-readable error message.
        operation: Git operation that failed (e.g., "commit", "push").
        recoverable: True if error might be recoverable.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        recoverable: bool = False,
    ) -> None:
        self.operation = operation
        self.recoverable = recoverable
        super().__init__(message)


class GitNotFoundError(GitError):
    """Git CLI is not installed or not in PATH."""

    def __init__(self, message: str = "Git CLI not found") -> None:
        super().__init__(message, operation="git_check", recoverable=False)


class NotARepositoryError(GitError):
    """Exception raised when operating outside a git repository.

    Attributes:
        path: Directory that is not a repo.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__(message, operation="repo_check", recoverable=False)


class NothingToCommitError(GitError):
    """The working tree has no changes to commit."""

    def __init__(self, message: str = "Nothing to commit") -> None:
        super().__init__(message, operation="commit", recoverable=False)


class PushRejectedError(GitError):
    """The remote rejected the push.

    Attributes:
        reason: Rejection details reported by git.
    """

    def __init__(self, message: str, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(message, operation="push", recoverable=False)
