"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest

from launchpad.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


def test_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHPAD_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHPAD_LOG_LEVEL", "chatty")
    configure_logging()
    assert logging.getLogger().level == logging.INFO


def test_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHPAD_LOG_LEVEL", "debug")
    configure_logging(level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_reconfigure_replaces_handlers() -> None:
    configure_logging(level=logging.INFO)
    configure_logging(level=logging.INFO)
    assert len(logging.getLogger().handlers) == 1


def test_json_output_includes_context(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(force_json=True, level=logging.INFO)
    bind_context(projectile_id="p-42")
    try:
        get_logger("launchpad.test").info("repository_created", repository="octocat/demo")
    finally:
        clear_context()

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "repository_created"
    assert record["repository"] == "octocat/demo"
    assert record["projectile_id"] == "p-42"
    assert record["level"] == "info"


def test_clear_context_removes_bound_values(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(force_json=True, level=logging.INFO)
    bind_context(projectile_id="p-42")
    clear_context()

    get_logger("launchpad.test").info("after_clear")

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert "projectile_id" not in record
