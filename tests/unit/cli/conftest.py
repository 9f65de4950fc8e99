"""Shared fixtures for CLI command tests.

Common fixtures available from parent conftest.py:
- cli_runner: Click CLI test runner
- clean_env: Environment without LAUNCHPAD_ variables
- isolated_home: Path.home() redirected so user config is ignored
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def cli_config(
    tmp_path: Path, catalog_file: Path, clean_env: None, isolated_home: Path
) -> Path:
    """Write a launchpad.yaml pointing at the sample catalog and two clusters."""
    config_path = tmp_path / "launchpad.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "github": {"token": "ghp_test"},
                "openshift": {
                    "token": "sha256~test",
                    "clusters": [
                        {
                            "id": "starter-us-east-1",
                            "api_url": "https://api.starter.example.com",
                            "type": "starter",
                        },
                        {
                            "id": "pro-eu-west-1",
                            "api_url": "https://api.pro.example.com",
                            "type": "pro",
                        },
                    ],
                },
                "catalog": {"path": str(catalog_file)},
            }
        )
    )
    return config_path
