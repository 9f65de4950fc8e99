"""Wizard step choosing the runtime for the selected mission."""

from __future__ import annotations

from dataclasses import dataclass

from launchpad.catalog import BoosterCatalog, Runtime, filters
from launchpad.catalog.filters import BoosterFilter
from launchpad.logging import get_logger
from launchpad.openshift import OpenShiftClusterRegistry
from launchpad.wizard.context import DeploymentType, ValidationMessage, WizardSelection

__all__ = ["ChooseRuntimeStep", "StepMetadata"]

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StepMetadata:
    name: str
    description: str
    category: str


class ChooseRuntimeStep:
    """Offers the runtimes that have a booster for the chosen mission.

    For CD deployments onto a cluster with a known type, runtimes whose
    boosters cannot run on that cluster type are left out.
    """

    INPUT_NAME = "runtime"

    metadata = StepMetadata(
        name="Runtime",
        description="Choose the runtime for your mission",
        category="Launchpad",
    )

    def __init__(
        self,
        catalog: BoosterCatalog,
        cluster_registry: OpenShiftClusterRegistry,
    ) -> None:
        self._catalog = catalog
        self._cluster_registry = cluster_registry

    def _cluster_filter(self, selection: WizardSelection) -> BoosterFilter:
        if selection.deployment_type is not DeploymentType.CD:
            return filters.accept_all
        cluster = self._cluster_registry.find_cluster_by_id(selection.openshift_cluster)
        if cluster is None or not cluster.type:
            return filters.accept_all
        return filters.runs_on(cluster.type)

    def runtime_choices(self, selection: WizardSelection) -> list[Runtime]:
        """Runtimes with at least one booster for the mission, in catalog order."""
        return self._catalog.get_runtimes(
            filters.all_of(
                self._cluster_filter(selection),
                filters.missions(selection.mission),
            )
        )

    def default_runtime(self, selection: WizardSelection) -> Runtime | None:
        return next(iter(self.runtime_choices(selection)), None)

    def validate(self, selection: WizardSelection) -> list[ValidationMessage]:
        """Check that a booster exists for the selected mission and runtime."""
        booster = self._catalog.get_booster(
            filters.all_of(
                filters.missions(selection.mission),
                filters.runtimes(selection.runtime),
            )
        )
        if booster is not None:
            return []
        message = (
            f"No booster found for mission '{selection.mission}' "
            f"and runtime '{selection.runtime}'"
        )
        logger.debug("runtime_validation_failed", reason=message)
        return [ValidationMessage(self.INPUT_NAME, message)]

    def next(self, selection: WizardSelection, runtime: Runtime | None) -> WizardSelection:
        """Record the chosen runtime for the following steps."""
        return selection.with_runtime(runtime)

    @staticmethod
    def item_label(runtime: Runtime, gui: bool) -> str:
        """Label shown for ``runtime``: display name in a GUI, id on a CLI."""
        return runtime.name if gui else runtime.id
