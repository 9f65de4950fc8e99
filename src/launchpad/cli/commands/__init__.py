"""Launchpad CLI commands."""
