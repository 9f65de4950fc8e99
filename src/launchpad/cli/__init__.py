"""Click-based command line interface for Launchpad."""

from __future__ import annotations

from launchpad.cli.context import CLIContext, ExitCode

__all__ = ["CLIContext", "ExitCode"]
