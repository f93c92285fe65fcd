"""Template file filtering."""

from pathlib import PurePath

__all__ = ("EXCLUDED_SUFFIXES", "RESERVED_DIRECTORIES", "should_copy")

RESERVED_DIRECTORIES = frozenset({"node_modules"})
"""Dependency cache directories never copied out of the template tree."""

# Also drops any other ``.yaml`` file in the template tree.
EXCLUDED_SUFFIXES: tuple[str, ...] = ("lock.json", ".lock", ".yaml")


def should_copy(relative_path: str) -> bool:
    """Decide whether a template entry is copied into a new project.

    Args:
        relative_path: Path of the entry, relative to the template root or absolute.

    Returns:
        True if the entry should be copied.
    """
    filename = PurePath(relative_path).name
    if filename in RESERVED_DIRECTORIES:
        return False
    return not filename.endswith(EXCLUDED_SUFFIXES)
