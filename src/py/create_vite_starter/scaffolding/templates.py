"""Add-on template definitions for scaffolding.

This module defines the optional add-ons that can be layered onto a
generated project and their configurations.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


def _str_list_factory() -> list[str]:
    return []


class AddonType(str, Enum):
    """Supported add-on types."""

    ROUTER = "router"


_ListStrFactory: Callable[[], list[str]] = _str_list_factory


@dataclass(frozen=True)
class AddonTemplate:
    """Configuration for an add-on.

    Attributes:
        name: Display name for the add-on
        type: Add-on type enum
        destination: Directory, relative to the project root, that receives the add-on tree
        entry_point: Project file replaced when the add-on is applied
        component: Component rendered by the replaced entry point
        dependencies: NPM dependencies to install
        dev_dependencies: NPM dev dependencies to install
    """

    name: str
    type: AddonType
    destination: str
    entry_point: str
    component: str
    dependencies: list[str] = field(default_factory=_ListStrFactory)
    dev_dependencies: list[str] = field(default_factory=_ListStrFactory)

    @property
    def import_path(self) -> str:
        """Module specifier used by the entry point to import the add-on."""
        return "./" + self.destination.split("/", 1)[-1]


ADDON_TEMPLATES: dict[AddonType, AddonTemplate] = {
    AddonType.ROUTER: AddonTemplate(
        name="TanStack Router",
        type=AddonType.ROUTER,
        destination="src/router",
        entry_point="src/main.tsx",
        component="AppRouter",
        dependencies=["@tanstack/react-router"],
        dev_dependencies=["@tanstack/router-devtools"],
    ),
}


def get_addon(name: "str | AddonType") -> "AddonTemplate | None":
    """Get an add-on by name.

    Args:
        name: Add-on name or type.

    Returns:
        The add-on if found, None otherwise.
    """
    if isinstance(name, AddonType):
        return ADDON_TEMPLATES.get(name)
    try:
        return ADDON_TEMPLATES.get(AddonType(name))
    except ValueError:
        return None
