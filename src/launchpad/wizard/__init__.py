"""Wizard steps collecting mission and runtime selections."""

from __future__ import annotations

from launchpad.wizard.context import DeploymentType, ValidationMessage, WizardSelection
from launchpad.wizard.runtime_step import ChooseRuntimeStep, StepMetadata

__all__ = [
    "ChooseRuntimeStep",
    "DeploymentType",
    "StepMetadata",
    "ValidationMessage",
    "WizardSelection",
]
