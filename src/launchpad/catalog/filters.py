"""Composable booster predicates.

Filters are plain callables ``Booster -> bool``; combine them with
:func:`all_of` for a logical AND.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from launchpad.catalog.models import Booster, Mission, Runtime
from launchpad.constants import RUNS_ON_METADATA_KEY

__all__ = [
    "BoosterFilter",
    "accept_all",
    "all_of",
    "is_supported",
    "missions",
    "runs_on",
    "runtimes",
]

BoosterFilter = Callable[[Booster], bool]

_ANY_TYPE = frozenset({"all", "*"})
_NO_TYPE = "none"


def accept_all(booster: Booster) -> bool:
    return True


def all_of(*filters: BoosterFilter) -> BoosterFilter:
    """Compose filters with logical AND; no filters accepts every booster."""

    def _all(booster: Booster) -> bool:
        return all(f(booster) for f in filters)

    return _all


def missions(mission: Mission | None) -> BoosterFilter:
    """Match boosters for ``mission``; ``None`` matches nothing."""
    return lambda booster: mission is not None and booster.mission == mission


def runtimes(runtime: Runtime | None) -> BoosterFilter:
    """Match boosters for ``runtime``; ``None`` matches nothing."""
    return lambda booster: runtime is not None and booster.runtime == runtime


def runs_on(cluster_type: str) -> BoosterFilter:
    """Match boosters whose ``runsOn`` metadata supports ``cluster_type``."""
    return lambda booster: is_supported(
        booster.get_metadata(RUNS_ON_METADATA_KEY), cluster_type
    )


def is_supported(supported_types: object, cluster_type: str | None) -> bool:
    """Check a ``runsOn`` declaration against a cluster type.

    The declaration is a string or a list of strings, compared
    case-insensitively:

    - missing or empty: runs everywhere
    - ``all`` or ``*``: runs everywhere
    - ``none``: runs nowhere
    - ``!type``: runs anywhere except ``type``
    - plain names: runs on those types only

    Args:
        supported_types: Raw ``runsOn`` metadata value.
        cluster_type: Type of the target cluster; ``None`` matches everything.

    Returns:
        True if a booster with this declaration can run on the cluster type.
    """
    if cluster_type is None or supported_types is None:
        return True
    types = _normalize(supported_types)
    if not types:
        return True
    wanted = cluster_type.strip().lower()

    if _NO_TYPE in types:
        return False
    if f"!{wanted}" in types:
        return False
    if wanted in types or _ANY_TYPE & set(types):
        return True
    # Only exclusions listed: everything not excluded is supported.
    return all(t.startswith("!") for t in types)


def _normalize(value: object) -> list[str]:
    items: Iterable[object]
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, Iterable):
        items = value
    else:
        items = [value]
    return [str(item).strip().lower() for item in items if str(item).strip()]
