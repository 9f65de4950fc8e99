"""Value objects describing the booster catalog.

Missions and runtimes are classification tags compared by ``id`` only, so a
``Runtime("vert.x")`` built from user input equals the catalog entry with the
same id regardless of display name.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

__all__ = ["Booster", "Mission", "Runtime"]


@dataclass(frozen=True, slots=True)
class Mission:
    """Purpose of a booster (e.g. ``rest-http``).

    Attributes:
        id: Stable identifier used in the catalog and on the command line.
        name: Display name.
        description: Optional longer description.
    """

    id: str
    name: str = field(default="", compare=False)
    description: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class Runtime:
    """Language or platform runtime a booster targets (e.g. ``vert.x``).

    Attributes:
        id: Stable identifier used in the catalog and on the command line.
        name: Display name.
        icon: Optional icon reference for graphical front-ends.
    """

    id: str
    name: str = field(default="", compare=False)
    icon: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class Booster:
    """A cataloged starter project for a mission/runtime combination.

    Attributes:
        id: Unique booster identifier.
        mission: Mission the booster implements.
        runtime: Runtime the booster is written for.
        name: Display name.
        git_repo: Source repository of the booster content.
        git_ref: Branch or tag of ``git_repo`` to use.
        metadata: Read-only extra attributes (e.g. ``runsOn``).
    """

    id: str
    mission: Mission
    runtime: Runtime
    name: str = field(default="", compare=False)
    git_repo: str | None = field(default=None, compare=False)
    git_ref: str | None = field(default=None, compare=False)
    metadata: Mapping[str, Any] = field(
        default_factory=dict, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.id)
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)
