"""Tests for the missions, runtimes and validate commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from launchpad.main import cli


class TestMissionsCommand:
    def test_lists_missions(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(cli, ["--config", str(cli_config), "missions"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0].startswith("Mission")
        assert [line.split()[0] for line in lines[1:]] == [
            "rest-http",
            "crud",
            "health-check",
        ]

    def test_json_output(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--config", str(cli_config), "missions", "--format", "json"]
        )

        assert result.exit_code == 0, result.output
        assert [m["id"] for m in json.loads(result.stdout)] == [
            "rest-http",
            "crud",
            "health-check",
        ]

    def test_missing_catalog(
        self, cli_runner: CliRunner, cli_config: Path, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "other.yaml"
        config_path.write_text(f"catalog:\n  path: {tmp_path / 'missing.yaml'}\n")

        result = cli_runner.invoke(cli, ["--config", str(config_path), "missions"])

        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output


class TestRuntimesCommand:
    def test_zip_lists_all_runtimes_for_mission(
        self, cli_runner: CliRunner, cli_config: Path
    ) -> None:
        result = cli_runner.invoke(
            cli,
            ["--config", str(cli_config), "runtimes", "-m", "rest-http", "-f", "json"],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {
            "mission": "rest-http",
            "runtimes": ["vert.x", "spring-boot", "nodejs"],
            "default": "vert.x",
        }

    def test_cd_filters_by_cluster_type(
        self, cli_runner: CliRunner, cli_config: Path
    ) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--config",
                str(cli_config),
                "runtimes",
                "-m",
                "rest-http",
                "-d",
                "cd",
                "--cluster",
                "starter-us-east-1",
                "-f",
                "json",
            ],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["runtimes"] == ["vert.x", "nodejs"]

    def test_text_marks_default(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--config", str(cli_config), "runtimes", "-m", "rest-http"]
        )

        assert result.exit_code == 0, result.output
        rows = result.stdout.splitlines()[1:]
        assert rows[0].startswith("vert.x")
        assert rows[0].rstrip().endswith("*")
        assert not rows[1].rstrip().endswith("*")

    def test_no_runtimes(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--config",
                str(cli_config),
                "runtimes",
                "-m",
                "crud",
                "-d",
                "cd",
                "--cluster",
                "pro-eu-west-1",
            ],
        )

        assert result.exit_code == 1
        assert "No runtimes available for mission 'crud'" in result.output

    def test_mission_required(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(cli, ["--config", str(cli_config), "runtimes"])
        assert result.exit_code == 2


class TestValidateCommand:
    def test_valid_combination(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["--config", str(cli_config), "validate", "-m", "rest-http", "-r", "nodejs"],
        )

        assert result.exit_code == 0, result.output
        assert "Booster available for mission 'rest-http' and runtime 'nodejs'" in (
            result.stdout
        )

    def test_invalid_combination(self, cli_runner: CliRunner, cli_config: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["--config", str(cli_config), "validate", "-m", "crud", "-r", "nodejs"],
        )

        assert result.exit_code == 1
        assert "No booster found for mission 'crud' and runtime 'nodejs'" in result.output
