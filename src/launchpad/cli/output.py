"""Output formatting helpers for the Launchpad CLI."""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "format_error",
    "format_json",
    "format_success",
    "format_table",
]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("Catalog not found", suggestion="Pass --catalog"))
        Error: Catalog not found
        Suggestion: Pass --catalog
    """
    lines = [f"Error: {message}"]
    for detail in details or []:
        lines.append(f"  {detail}")
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)


def format_success(message: str) -> str:
    return f"Success: {message}"


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a simple text table with pipe separators.

    Example:
        >>> print(format_table(["Id", "Name"], [["vert.x", "Eclipse Vert.x"]]))
        Id     | Name
        vert.x | Eclipse Vert.x
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(col_widths):
                col_widths[i] = max(col_widths[i], len(cell))

    lines = [" | ".join(h.ljust(col_widths[i]) for i, h in enumerate(headers)).rstrip()]
    for row in rows:
        parts = [
            cell.ljust(col_widths[i]) if i < len(col_widths) else cell
            for i, cell in enumerate(row)
        ]
        lines.append(" | ".join(parts).rstrip())
    return "\n".join(lines)
