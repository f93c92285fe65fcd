"""Scaffolding configuration.

All ambient process state (environment variables, working directory) is read
here, once, so the scaffolding pipeline itself only works with explicit values.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from create_vite_starter.utils import get_template_path

__all__ = ("USER_AGENT_ENV", "ScaffoldConfig")

logger = logging.getLogger("create_vite_starter")

USER_AGENT_ENV = "npm_config_user_agent"
"""Environment variable set by npm, yarn, pnpm and bun when they launch a package binary."""


def _default_template_dir() -> Path:
    env_value = os.getenv("CREATE_VITE_STARTER_TEMPLATE_DIR")
    return Path(env_value) if env_value else get_template_path("vite")


def _default_addon_dir() -> Path:
    env_value = os.getenv("CREATE_VITE_STARTER_ADDON_DIR")
    return Path(env_value) if env_value else get_template_path("addons", "router")


@dataclass
class ScaffoldConfig:
    """Inputs for a scaffolding run.

    Attributes:
        template_dir: Root of the template tree copied into new projects.
        addon_dir: Root of the routing add-on tree.
        user_agent: Self-reported identity of the invoking package manager, if any.
        cwd: Working directory used to resolve relative targets and probe lockfiles.
        git_executable: Executable used to initialize the repository.
    """

    template_dir: Path = field(default_factory=_default_template_dir)
    addon_dir: Path = field(default_factory=_default_addon_dir)
    user_agent: "str | None" = field(default_factory=lambda: os.getenv(USER_AGENT_ENV))
    cwd: Path = field(default_factory=Path.cwd)
    git_executable: str = field(default_factory=lambda: os.getenv("CREATE_VITE_STARTER_GIT", "git"))

    def __post_init__(self) -> None:
        """Normalize paths."""
        self.template_dir = Path(self.template_dir)
        self.addon_dir = Path(self.addon_dir)
        self.cwd = Path(self.cwd).resolve()
        if self.user_agent is not None and not self.user_agent.strip():
            self.user_agent = None

    def resolve_target(self, target: "str | Path") -> Path:
        """Resolve a user supplied target against the configured working directory.

        Args:
            target: Absolute or relative target path.

        Returns:
            The absolute target directory.
        """
        path = Path(target).expanduser()
        if not path.is_absolute():
            path = self.cwd / path
        resolved = path.resolve()
        logger.debug("Resolved target %r to %s", str(target), resolved)
        return resolved
