from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from launchpad.constants import (
    DEFAULT_BRANCH,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_GITHUB_API_URL,
)
from launchpad.exceptions import ConfigError
from launchpad.logging import get_logger

__all__ = [
    "LaunchpadConfig",
    "GitHubConfig",
    "ClusterConfig",
    "OpenShiftConfig",
    "CatalogConfig",
    "load_config",
    "get_user_config_path",
    "PROJECT_CONFIG_FILENAME",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "launchpad.yaml"


class GitHubConfig(BaseModel):
    """Settings for the GitHub integration.

    Attributes:
        api_url: Base URL of the GitHub REST API (GitHub Enterprise supported).
        token: Personal access token used when no identity is given explicitly.
        default_branch: Branch the generated content is pushed to.
        commit_message: Message of the initial commit.
        author_name: Commit author name for the initial commit.
        author_email: Commit author email for the initial commit.
    """

    api_url: str = DEFAULT_GITHUB_API_URL
    token: str | None = None
    default_branch: str = DEFAULT_BRANCH
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    author_name: str = "Launchpad"
    author_email: str = "launchpad@localhost"


class ClusterConfig(BaseModel):
    """A single OpenShift cluster known to the registry.

    Example launchpad.yaml:
        openshift:
          clusters:
            - id: starter-us-east-1
              api_url: https://api.starter-us-east-1.openshift.com
              console_url: https://console.starter-us-east-1.openshift.com
              type: starter
    """

    id: str
    api_url: str
    console_url: str | None = None
    type: str | None = None


class OpenShiftConfig(BaseModel):
    """Settings for OpenShift access."""

    clusters: list[ClusterConfig] = Field(default_factory=list)
    token: str | None = None
    verify_ssl: bool = True
    timeout_seconds: float = Field(default=30.0, gt=0.0, le=300.0)

    @field_validator("clusters")
    @classmethod
    def check_unique_ids(cls, v: list[ClusterConfig]) -> list[ClusterConfig]:
        ids = [cluster.id for cluster in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate cluster ids: {', '.join(duplicates)}")
        return v


class CatalogConfig(BaseModel):
    """Settings for the booster catalog.

    The file is only read when a command needs the catalog, so a missing
    path is not a configuration error.
    """

    path: Path = Field(default_factory=lambda: Path("booster-catalog.yaml"))


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    f"Config file {yaml_file} must contain a mapping",
                    value=type(loaded).__name__,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class LaunchpadConfig(BaseSettings):
    """Root configuration object containing all Launchpad settings."""

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHPAD_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    openshift: OpenShiftConfig = Field(default_factory=OpenShiftConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init arguments
        2. Environment variables (LAUNCHPAD_*)
        3. Project YAML config (./launchpad.yaml or the --config path)
        4. User YAML config (~/.config/launchpad/config.yaml)
        """
        project_config_path = (
            _active_project_config or Path.cwd() / PROJECT_CONFIG_FILENAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


# Set by load_config() for the duration of one LaunchpadConfig() call.
_active_project_config: Path | None = None


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/launchpad/config.yaml
    """
    return Path.home() / ".config" / "launchpad" / "config.yaml"


def load_config(config_path: Path | None = None) -> LaunchpadConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to project config file.
            Defaults to ./launchpad.yaml

    Returns:
        LaunchpadConfig instance with merged configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    global _active_project_config

    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILENAME

    if not config_path.exists():
        logger.info("project_config_missing", path=str(config_path))

    _active_project_config = config_path
    try:
        return LaunchpadConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _active_project_config = None
