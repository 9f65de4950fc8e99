"""Status notifications emitted after each successful provisioning step."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from launchpad.logging import get_logger

__all__ = [
    "StatusEmitter",
    "StatusEventType",
    "StatusListener",
    "StatusMessageEvent",
    "log_status_event",
]

logger = get_logger(__name__)


class StatusEventType(str, Enum):
    """Identifiers of the provisioning steps, in execution order."""

    GITHUB_CREATE = "GITHUB_CREATE"
    GITHUB_PUSHED = "GITHUB_PUSHED"
    GITHUB_WEBHOOK = "GITHUB_WEBHOOK"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[StatusEventType, str] = {
    StatusEventType.GITHUB_CREATE: "Creating your new GitHub repository",
    StatusEventType.GITHUB_PUSHED: "Pushing your customized booster code into the repo",
    StatusEventType.GITHUB_WEBHOOK: "Setting up your build pipeline webhooks",
}


@dataclass(frozen=True, slots=True)
class StatusMessageEvent:
    """Notification that a step completed for a projectile.

    Attributes:
        projectile_id: Correlation id of the request.
        status_type: Step that completed.
        data: Optional details, e.g. ``{"location": <repository URL>}``.
    """

    projectile_id: str
    status_type: StatusEventType
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.projectile_id,
            "statusMessage": self.status_type.value,
            "message": self.status_type.message,
            "data": dict(self.data),
        }


StatusListener = Callable[[StatusMessageEvent], None]


class StatusEmitter:
    """Delivers status events to listeners in registration order."""

    def __init__(self, *listeners: StatusListener) -> None:
        self._listeners: list[StatusListener] = list(listeners)

    def add_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def emit(self, event: StatusMessageEvent) -> None:
        for listener in self._listeners:
            listener(event)


def log_status_event(event: StatusMessageEvent) -> None:
    logger.info(
        "status_event",
        projectile_id=event.projectile_id,
        status=event.status_type.value,
        **dict(event.data),
    )
