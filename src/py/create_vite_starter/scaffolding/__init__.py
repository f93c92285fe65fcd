"""Project scaffolding module for create-vite-starter.

This module copies the bundled Vite template into a new project directory and
optionally layers add-ons on top of it.

Supported add-ons:
- TanStack Router
"""

from create_vite_starter.scaffolding.addons import inject_addon
from create_vite_starter.scaffolding.filters import should_copy
from create_vite_starter.scaffolding.generator import materialize_project, validate_target
from create_vite_starter.scaffolding.templates import AddonTemplate, AddonType, get_addon

__all__ = [
    "AddonTemplate",
    "AddonType",
    "get_addon",
    "inject_addon",
    "materialize_project",
    "should_copy",
    "validate_target",
]
