"""
Naming utilities for component generation.

String helpers used to derive component identifiers and file names
from raw widget names.
"""

import re


def remove_prefix(name: str, prefix: str) -> str:
    """
    Remove a leading prefix from a name.

    The match is exact (case-sensitive). Names that do not start with
    the prefix are returned unchanged.

    Args:
        name: Original name (e.g. "dxButton")
        prefix: Prefix to strip (e.g. "dx")

    Returns:
        Name without the prefix
    """
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def to_kebab_case(name: str) -> str:
    """Convert a mixed-case identifier to kebab-case (DataGrid -> data-grid)."""
    # Insert hyphen before uppercase letters
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name)

    # Treat underscores and spaces as word boundaries too
    name = re.sub(r"[_\s]+", "-", name)

    return re.sub(r"-+", "-", name).strip("-").lower()


def uppercase_first(name: str) -> str:
    """Capitalize the first character only."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def remove_extension(path: str) -> str:
    """Strip the final file extension from a path, keeping directories."""
    head, sep, tail = path.rpartition("/")
    if "." in tail.lstrip("."):
        tail = tail[: tail.rindex(".")]
    return f"{head}{sep}{tail}"
