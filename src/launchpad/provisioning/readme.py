"""``${name}`` variable substitution for generated README files."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

__all__ = ["replace_file_variables", "substitute_variables"]

_VARIABLE = re.compile(r"\$\{([^{}]+)\}")


def substitute_variables(text: str, values: Mapping[str, str]) -> str:
    """Replace ``${name}`` tokens; unknown names are left untouched.

    Example:
        >>> substitute_variables("by ${loggedUser} ${other}", {"loggedUser": "octo"})
        'by octo ${other}'
    """
    return _VARIABLE.sub(lambda m: values.get(m.group(1), m.group(0)), text)


def replace_file_variables(path: Path, values: Mapping[str, str]) -> bool:
    """Substitute variables in ``path`` in place.

    Returns:
        True if the file content changed.

    Raises:
        OSError: If the file cannot be read or written.
    """
    content = path.read_text(encoding="utf-8")
    new_content = substitute_variables(content, values)
    if new_content == content:
        return False
    path.write_text(new_content, encoding="utf-8")
    return True
