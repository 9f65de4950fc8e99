from __future__ import annotations

from launchpad.exceptions.base import LaunchpadError


class GitHubError(LaunchpadError):
    """Exception for GitHub API failures.

    Raised when GitHub operations fail, such as creating repositories or hooks.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status returned by GitHub (if applicable).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GitHubAuthError(GitHubError):
    """The GitHub identity was rejected or is missing.

    Attributes:
        message: Custom error message (optional, default explains the fix).
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "GitHub credentials are missing or invalid. "
            "Set LAUNCHPAD_GITHUB__TOKEN or configure github.token.",
            status_code=401,
        )


class DuplicateHookError(GitHubError):
    """A webhook with the same URL already exists on the repository.

    Callers that expect re-runs may catch this and look the hook up instead.

    Attributes:
        url: The webhook URL that already exists.
        repository: Full name of the repository (owner/repo).
    """

    def __init__(self, url: str, repository: str | None = None) -> None:
        self.url = url
        self.repository = repository
        super().__init__(
            f"Webhook for '{url}' already exists on {repository or 'repository'}",
            status_code=422,
        )
