"""Utility helpers for create-vite-starter."""

from importlib.util import find_spec
from pathlib import Path

from rich.console import Console

console = Console()
"""Shared console for user-facing output."""


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-vite-starter package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_vite_starter")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    # Fallback for uncommon import contexts.
    return Path(__file__).resolve().parent.joinpath(*parts)


def get_template_path(*parts: str) -> Path:
    """Resolve a path inside the bundled ``templates`` directory.

    Args:
        *parts: Path segments relative to the templates directory.

    Returns:
        Path to the bundled template resource.
    """
    return get_package_path("templates", *parts)


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    return path.read_text(encoding=encoding)


def write_text_file(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write a text file with consistent encoding, creating parent directories.

    Args:
        path: File path to write.
        content: Text to write.
        encoding: Text encoding.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
