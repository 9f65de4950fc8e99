"""Booster catalog: missions, runtimes, boosters and their filters."""

from __future__ import annotations

from launchpad.catalog import filters
from launchpad.catalog.catalog import BoosterCatalog
from launchpad.catalog.filters import BoosterFilter
from launchpad.catalog.models import Booster, Mission, Runtime

__all__ = [
    "Booster",
    "BoosterCatalog",
    "BoosterFilter",
    "Mission",
    "Runtime",
    "filters",
]
