"""CLI context and exit codes for Launchpad."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import click

from launchpad.catalog import BoosterCatalog
from launchpad.config import LaunchpadConfig
from launchpad.openshift import OpenShiftClusterRegistry

__all__ = ["CLIContext", "ExitCode", "get_cli_context"]


class ExitCode(IntEnum):
    """Standard exit codes for the Launchpad CLI."""

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and configuration shared by all commands.

    Attributes:
        config: Loaded Launchpad configuration.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: LaunchpadConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False

    def load_catalog(self, path: Path | None = None) -> BoosterCatalog:
        """Load the booster catalog from ``path`` or the configured location.

        Raises:
            CatalogError: If the catalog cannot be read.
        """
        return BoosterCatalog.from_file(path or self.config.catalog.path)

    def cluster_registry(self) -> OpenShiftClusterRegistry:
        return OpenShiftClusterRegistry.from_config(self.config.openshift)


def get_cli_context(ctx: click.Context) -> CLIContext:
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    return cli_ctx
