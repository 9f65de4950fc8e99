"""Shared pytest fixtures for Launchpad tests."""
