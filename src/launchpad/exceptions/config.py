from __future__ import annotations

from typing import Any

from launchpad.exceptions.base import LaunchpadError


class ConfigError(LaunchpadError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised for YAML parsing failures, Pydantic validation errors and invalid
    environment variable values.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional dotted field name that caused the error
            (e.g., "openshift.timeout_seconds").
        value: Optional value that failed validation.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message)
