from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from click.testing import CliRunner

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.catalog",
    "tests.fixtures.provisioning",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for the test environment.

    Logs go to stderr at WARNING so they don't mix with command output.
    """
    from launchpad.logging import clear_context, configure_logging

    configure_logging(level=logging.WARNING)
    yield
    clear_context()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory and restore the cwd afterwards."""
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all LAUNCHPAD_ environment variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("LAUNCHPAD_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def isolated_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point Path.home() at a scratch directory so user config is ignored."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def sample_config_yaml() -> str:
    """Return sample launchpad.yaml content for testing."""
    return """
github:
  token: "ghp_from_file"
  default_branch: "main"
  author_name: "Launch Bot"

openshift:
  token: "sha256~cluster-token"
  clusters:
    - id: starter-us-east-1
      api_url: https://api.starter-us-east-1.example.com
      console_url: https://console.starter-us-east-1.example.com
      type: starter
    - id: pro-eu-west-1
      api_url: https://api.pro-eu-west-1.example.com
      type: pro

catalog:
  path: booster-catalog.yaml

verbosity: "info"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
