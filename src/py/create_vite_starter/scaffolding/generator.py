"""Project materialization.

This module copies the bundled template tree into a new project directory.
"""

import logging
import os
import shutil
from collections.abc import Callable
from pathlib import Path

from create_vite_starter.exceptions import CopyFailureError, DirectoryConflictError
from create_vite_starter.scaffolding.filters import should_copy
from create_vite_starter.utils import read_text_file, write_text_file

__all__ = ("GITIGNORE_FILENAME", "STAGED_GITIGNORE_FILENAME", "materialize_project", "validate_target")

logger = logging.getLogger("create_vite_starter")

STAGED_GITIGNORE_FILENAME = "git-ignore.txt"
"""Template file holding the ``.gitignore`` contents of generated projects."""
GITIGNORE_FILENAME = ".gitignore"


def validate_target(target_dir: Path) -> None:
    """Ensure ``target_dir`` can receive a new project.

    Args:
        target_dir: Directory the project will be created in.

    Raises:
        DirectoryConflictError: If the target exists and is not an empty directory.
    """
    if not target_dir.exists():
        return
    if not target_dir.is_dir():
        raise DirectoryConflictError(target_dir)
    if any(target_dir.iterdir()):
        raise DirectoryConflictError(target_dir)


def _ignore_filtered(template_root: Path) -> "Callable[[str, list[str]], set[str]]":
    def _ignore(directory: str, names: "list[str]") -> set[str]:
        relative_dir = os.path.relpath(directory, template_root)
        ignored = {name for name in names if not should_copy(os.path.join(relative_dir, name))}
        if ignored:
            logger.debug("Skipping %s in %s", sorted(ignored), relative_dir)
        return ignored

    return _ignore


def _restore_gitignore(target_dir: Path) -> None:
    staged = target_dir / STAGED_GITIGNORE_FILENAME
    if not staged.is_file():
        return
    # Copy the content rather than renaming so this works across volumes.
    write_text_file(target_dir / GITIGNORE_FILENAME, read_text_file(staged))
    staged.unlink()


def materialize_project(template_root: Path, target_dir: Path) -> None:
    """Copy the template tree into ``target_dir``.

    Entries rejected by :func:`should_copy` are skipped entirely. A staged
    ``git-ignore.txt`` at the project root becomes ``.gitignore``. Files already
    written are left in place if the copy fails part way.

    Args:
        template_root: Root of the template tree.
        target_dir: Directory to create the project in.

    Raises:
        DirectoryConflictError: If the target exists and is not empty. Nothing is written.
        CopyFailureError: If the template cannot be copied.
    """
    validate_target(target_dir)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(template_root, target_dir, ignore=_ignore_filtered(template_root), dirs_exist_ok=True)
        _restore_gitignore(target_dir)
    except OSError as e:
        raise CopyFailureError(template_root, target_dir, str(e)) from e

    logger.debug("Materialized %s into %s", template_root, target_dir)
