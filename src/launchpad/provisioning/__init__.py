"""Provisioning sequence: repository creation, initial push, webhooks."""

from __future__ import annotations

from launchpad.provisioning.events import (
    StatusEmitter,
    StatusEventType,
    StatusListener,
    StatusMessageEvent,
    log_status_event,
)
from launchpad.provisioning.github_steps import GitHubSteps
from launchpad.provisioning.pipeline import ProvisioningPipeline, Step, create_pipeline
from launchpad.provisioning.projectile import CreateProjectile, ProvisioningState
from launchpad.provisioning.readme import replace_file_variables, substitute_variables

__all__ = [
    "CreateProjectile",
    "GitHubSteps",
    "ProvisioningPipeline",
    "ProvisioningState",
    "StatusEmitter",
    "StatusEventType",
    "StatusListener",
    "StatusMessageEvent",
    "Step",
    "create_pipeline",
    "log_status_event",
    "replace_file_variables",
    "substitute_variables",
]
