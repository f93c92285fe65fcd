"""Package manager detection."""

import logging
from enum import Enum
from pathlib import Path

__all__ = ("LOCKFILES", "PackageManager", "detect_package_manager")

logger = logging.getLogger("create_vite_starter")


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


_USER_AGENT_HINTS: tuple[PackageManager, ...] = (PackageManager.PNPM, PackageManager.YARN, PackageManager.BUN)

LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lock", PackageManager.BUN),
)
"""Lockfiles probed in the working directory, in priority order."""


def _detect_from_user_agent(user_agent: "str | None") -> "PackageManager | None":
    if not user_agent:
        return None
    for manager in _USER_AGENT_HINTS:
        if manager.value in user_agent:
            return manager
    return None


def detect_package_manager(user_agent: "str | None", cwd: Path) -> PackageManager:
    """Choose the package manager for a new project.

    The invoking package manager's user agent wins over lockfiles found in ``cwd``.
    Falls back to npm when nothing matches or the working directory cannot be probed.

    Args:
        user_agent: Value of the package manager's user agent hint, if any.
        cwd: Directory probed for lockfiles.

    Returns:
        The detected package manager.
    """
    manager = _detect_from_user_agent(user_agent)
    if manager is not None:
        logger.debug("Detected %s from user agent %r", manager.value, user_agent)
        return manager

    try:
        for lockfile, candidate in LOCKFILES:
            if (cwd / lockfile).exists():
                logger.debug("Detected %s from %s", candidate.value, lockfile)
                return candidate
    except OSError as e:
        logger.debug("Could not probe %s for lockfiles: %s", cwd, e)
    return PackageManager.NPM
