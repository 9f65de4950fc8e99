"""In-memory booster catalog and its YAML/JSON loader.

Catalog document layout::

    missions:
      - id: rest-http
        name: REST API Level 0
    runtimes:
      - id: vert.x
        name: Eclipse Vert.x
    boosters:
      - id: rest-http-vertx
        mission: rest-http
        runtime: vert.x
        git_repo: https://github.com/example/rest-http-vertx
        git_ref: master
        metadata:
          runsOn: [starter, "!osio"]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from launchpad.catalog.filters import BoosterFilter, accept_all
from launchpad.catalog.models import Booster, Mission, Runtime
from launchpad.exceptions import CatalogError
from launchpad.logging import get_logger

__all__ = ["BoosterCatalog"]

logger = get_logger(__name__)


class BoosterCatalog:
    """Ordered, immutable collection of boosters.

    Query results keep catalog order, so the first runtime listed for a
    mission is the wizard's default choice.
    """

    def __init__(self, boosters: Iterable[Booster]) -> None:
        self._boosters: tuple[Booster, ...] = tuple(boosters)
        seen: set[str] = set()
        for booster in self._boosters:
            if booster.id in seen:
                raise CatalogError(f"Duplicate booster id: {booster.id}")
            seen.add(booster.id)

    @classmethod
    def from_file(cls, path: str | Path) -> BoosterCatalog:
        """Load a catalog from a YAML (or JSON) file.

        Raises:
            CatalogError: If the file is missing, unparsable or inconsistent.
        """
        path = Path(path)
        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}", path=path) from e
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {path}: {e}", path=path) from e
        if not isinstance(data, Mapping):
            raise CatalogError(f"Catalog {path} must contain a mapping", path=path)
        try:
            catalog = cls.from_dict(data)
        except CatalogError as e:
            raise CatalogError(f"{path}: {e.message}", path=path) from e
        logger.debug("catalog_loaded", path=str(path), boosters=len(catalog))
        return catalog

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BoosterCatalog:
        """Build a catalog from already-parsed catalog data.

        Raises:
            CatalogError: On missing sections, duplicate ids, unknown
                references or malformed entries.
        """
        for section in ("missions", "runtimes", "boosters"):
            if not isinstance(data.get(section), list):
                raise CatalogError(f"Catalog must contain a top-level '{section}' list")

        try:
            missions = [
                Mission(
                    id=str(entry["id"]),
                    name=entry.get("name", ""),
                    description=entry.get("description"),
                )
                for entry in data["missions"]
            ]
            runtimes = [
                Runtime(
                    id=str(entry["id"]),
                    name=entry.get("name", ""),
                    icon=entry.get("icon"),
                )
                for entry in data["runtimes"]
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogError(f"Malformed mission or runtime entry: {e!r}") from e
        mission_index = _index_by_id(missions, "mission")
        runtime_index = _index_by_id(runtimes, "runtime")

        boosters = [
            _parse_booster(entry, mission_index, runtime_index)
            for entry in data["boosters"]
        ]
        return cls(boosters)

    def get_boosters(self, booster_filter: BoosterFilter = accept_all) -> list[Booster]:
        return [b for b in self._boosters if booster_filter(b)]

    def get_booster(self, booster_filter: BoosterFilter = accept_all) -> Booster | None:
        """Return the first booster matching ``booster_filter``, if any."""
        return next((b for b in self._boosters if booster_filter(b)), None)

    def get_missions(self, booster_filter: BoosterFilter = accept_all) -> list[Mission]:
        return _distinct(b.mission for b in self.get_boosters(booster_filter))

    def get_runtimes(self, booster_filter: BoosterFilter = accept_all) -> list[Runtime]:
        """Return runtimes having at least one booster matching the filter."""
        return _distinct(b.runtime for b in self.get_boosters(booster_filter))

    def __iter__(self) -> Iterator[Booster]:
        return iter(self._boosters)

    def __len__(self) -> int:
        return len(self._boosters)

    def __contains__(self, booster_id: object) -> bool:
        return any(b.id == booster_id for b in self._boosters)


def _distinct(items: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(items))


def _index_by_id(items: list[Any], kind: str) -> dict[str, Any]:
    index: dict[str, Any] = {}
    for item in items:
        if item.id in index:
            raise CatalogError(f"Duplicate {kind} id: {item.id}")
        index[item.id] = item
    return index


def _parse_booster(
    entry: Any,
    missions: Mapping[str, Mission],
    runtimes: Mapping[str, Runtime],
) -> Booster:
    if not isinstance(entry, Mapping) or "id" not in entry:
        raise CatalogError(f"Booster entry must be a mapping with an 'id': {entry!r}")
    booster_id = str(entry["id"])

    mission = missions.get(str(entry.get("mission")))
    if mission is None:
        raise CatalogError(
            f"Booster '{booster_id}' references unknown mission '{entry.get('mission')}'"
        )
    runtime = runtimes.get(str(entry.get("runtime")))
    if runtime is None:
        raise CatalogError(
            f"Booster '{booster_id}' references unknown runtime '{entry.get('runtime')}'"
        )

    metadata = entry.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        raise CatalogError(f"Booster '{booster_id}' metadata must be a mapping")

    return Booster(
        id=booster_id,
        mission=mission,
        runtime=runtime,
        name=entry.get("name", ""),
        git_repo=entry.get("git_repo"),
        git_ref=entry.get("git_ref"),
        metadata=metadata,
    )
