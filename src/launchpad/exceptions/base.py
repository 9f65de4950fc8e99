from __future__ import annotations


class LaunchpadError(Exception):
    """Base exception class for all Launchpad-specific errors.

    All custom exceptions in Launchpad inherit from this class, which allows
    catching them at the CLI boundary while letting system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
