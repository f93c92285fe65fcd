"""Add-on injection.

Add-ons are pre-built source trees layered onto a generated project. They are
copied without filtering and replace the project's entry point.
"""

import logging
import shutil
from pathlib import Path
from typing import Any

from create_vite_starter.exceptions import AddonMissingError, CopyFailureError
from create_vite_starter.scaffolding.templates import AddonTemplate
from create_vite_starter.utils import write_text_file

__all__ = ("ENTRY_POINT_TEMPLATE", "inject_addon", "render_entry_point")

logger = logging.getLogger("create_vite_starter")

ENTRY_POINT_TEMPLATE = """\
import { StrictMode } from "react";
import { createRoot } from "react-dom/client";
import { {{ component }} } from "{{ import_path }}";
import "./index.css";

createRoot(document.getElementById("root")!).render(
  <StrictMode>
    <{{ component }} />
  </StrictMode>,
);
"""


def render_entry_point(addon: AddonTemplate) -> str:
    """Render the entry point that mounts an add-on's root component.

    Rendered with autoescaping disabled because the output is source code.

    Args:
        addon: The add-on being applied.

    Returns:
        The entry point content.
    """
    from jinja2 import Environment

    env = Environment(keep_trailing_newline=True, autoescape=False)  # noqa: S701
    context: dict[str, Any] = {"component": addon.component, "import_path": addon.import_path}
    return env.from_string(ENTRY_POINT_TEMPLATE).render(**context)


def inject_addon(addon_root: Path, target_dir: Path, addon: AddonTemplate) -> list[Path]:
    """Merge an add-on into a materialized project.

    The entry point is replaced as a whole; edits made to it in the base
    template are discarded.

    Args:
        addon_root: Root of the add-on source tree.
        target_dir: Root of the generated project.
        addon: The add-on definition.

    Raises:
        AddonMissingError: If ``addon_root`` does not exist. The project is left untouched.
        CopyFailureError: If the add-on files cannot be written.

    Returns:
        The written paths: the add-on destination and the entry point.
    """
    if not addon_root.is_dir():
        raise AddonMissingError(addon.name, addon_root)

    destination = target_dir / addon.destination
    entry_point = target_dir / addon.entry_point
    try:
        shutil.copytree(addon_root, destination, dirs_exist_ok=True)
        write_text_file(entry_point, render_entry_point(addon))
    except OSError as e:
        raise CopyFailureError(addon_root, destination, str(e)) from e

    logger.debug("Injected %s into %s", addon.name, destination)
    return [destination, entry_point]
