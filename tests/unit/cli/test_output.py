"""Unit tests for CLI output formatting utilities.

Tests the output formatting functions:
- format_error()
- format_success()
- format_json()
- format_table()
"""

from __future__ import annotations

import json

from launchpad.cli.output import format_error, format_json, format_success, format_table


class TestFormatError:
    """Tests for format_error()."""

    def test_message_only(self) -> None:
        assert format_error("Catalog not found") == "Error: Catalog not found"

    def test_details_and_suggestion(self) -> None:
        """Details are indented and the suggestion comes last."""
        result = format_error(
            "Catalog not found",
            details=["path: booster-catalog.yaml"],
            suggestion="Pass --catalog",
        )
        assert result.splitlines() == [
            "Error: Catalog not found",
            "  path: booster-catalog.yaml",
            "Suggestion: Pass --catalog",
        ]


def test_format_success() -> None:
    assert format_success("done") == "Success: done"


def test_format_json_round_trips() -> None:
    data = {"mission": "rest-http", "runtimes": ["vert.x"], "default": None}
    assert json.loads(format_json(data)) == data


class TestFormatTable:
    """Tests for format_table()."""

    def test_aligns_columns(self) -> None:
        result = format_table(
            ["Runtime", "Name"],
            [["vert.x", "Eclipse Vert.x"], ["nodejs", "Node.js"]],
        )
        assert result.splitlines() == [
            "Runtime | Name",
            "vert.x  | Eclipse Vert.x",
            "nodejs  | Node.js",
        ]

    def test_trailing_empty_cell_is_stripped(self) -> None:
        result = format_table(["Id", "Default"], [["a", ""]])
        assert result.splitlines()[1] == "a  |"

    def test_no_headers(self) -> None:
        assert format_table([], [["x"]]) == ""

    def test_headers_only(self) -> None:
        assert format_table(["Mission", "Name"], []) == "Mission | Name"
