from __future__ import annotations

from launchpad.exceptions.base import LaunchpadError


class ProvisioningStateError(LaunchpadError):
    """A provisioning step was invoked without the state it requires.

    Raised when steps run out of order, e.g. pushing before the remote
    repository exists. Aborts the whole provisioning request.

    Attributes:
        message: Human-readable error message.
        step: Name of the step whose precondition failed.
    """

    def __init__(self, message: str, step: str | None = None) -> None:
        self.step = step
        super().__init__(message)
