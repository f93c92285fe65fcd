"""JavaScript package manager executors.

This module provides executor classes for the supported package managers
(npm, Yarn, pnpm, Bun) and plans the dependency installation commands for a
new project.
"""

import logging
from abc import ABC
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from create_vite_starter.detector import PackageManager

if TYPE_CHECKING:
    from create_vite_starter.process import CommandResult, ProcessRunner
    from create_vite_starter.scaffolding.templates import AddonTemplate

__all__ = (
    "BunExecutor",
    "InstallCommand",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
    "plan_install",
    "run_install_plan",
)

logger = logging.getLogger("create_vite_starter")


@dataclass(frozen=True)
class InstallCommand:
    """A single package manager invocation."""

    command: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        return " ".join((self.command, *self.args))


class JSExecutor(ABC):
    """Abstract base class for package manager executors."""

    bin_name: ClassVar[str]
    install_verb: ClassVar[str] = "install"
    add_verb: ClassVar[str] = "add"
    dev_flag: ClassVar[str] = "-D"

    @property
    def install_command(self) -> InstallCommand:
        """Get the command installing every declared dependency (e.g., npm install)."""
        return InstallCommand(self.bin_name, (self.install_verb,))

    def add_command(self, packages: "list[str]", *, dev: bool = False) -> InstallCommand:
        """Get the command adding ``packages`` to the project.

        Args:
            packages: Package names to add.
            dev: Whether the packages are development-only.

        Returns:
            The add command.
        """
        args = [self.add_verb, *([self.dev_flag] if dev else []), *packages]
        return InstallCommand(self.bin_name, tuple(args))

    def run_command(self, script: str) -> InstallCommand:
        """Get the command running a ``package.json`` script (e.g., npm run dev)."""
        return InstallCommand(self.bin_name, ("run", script))


class NodeExecutor(JSExecutor):
    """npm executor."""

    bin_name = "npm"
    add_verb = "install"
    dev_flag = "--save-dev"


class YarnExecutor(JSExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    # A bare ``yarn add`` is used as the install-everything step.
    install_verb = "add"


class PnpmExecutor(JSExecutor):
    """pnpm executor."""

    bin_name = "pnpm"


class BunExecutor(JSExecutor):
    """Bun executor."""

    bin_name = "bun"
    dev_flag = "-d"


_EXECUTORS: dict[PackageManager, type[JSExecutor]] = {
    PackageManager.NPM: NodeExecutor,
    PackageManager.YARN: YarnExecutor,
    PackageManager.PNPM: PnpmExecutor,
    PackageManager.BUN: BunExecutor,
}


def get_executor(manager: "PackageManager | str") -> JSExecutor:
    """Get the executor for a package manager.

    Args:
        manager: The package manager.

    Returns:
        The matching executor.
    """
    return _EXECUTORS[PackageManager(manager)]()


def plan_install(manager: "PackageManager | str", addon: "AddonTemplate | None" = None) -> list[InstallCommand]:
    """Plan the dependency installation for a new project.

    Args:
        manager: The detected package manager.
        addon: The selected add-on, if any.

    Returns:
        The commands to run, in order.
    """
    executor = get_executor(manager)
    plan = [executor.install_command]
    if addon is not None:
        if addon.dependencies:
            plan.append(executor.add_command(addon.dependencies))
        if addon.dev_dependencies:
            plan.append(executor.add_command(addon.dev_dependencies, dev=True))
    return plan


def run_install_plan(plan: "list[InstallCommand]", runner: "ProcessRunner", cwd: Path) -> "list[CommandResult]":
    """Run planned commands one after another inside ``cwd``.

    The first failing command aborts the remaining ones and its error is
    re-raised to the caller.

    Args:
        plan: Commands from :func:`plan_install`.
        runner: Process runner used to execute each command.
        cwd: Project root.

    Returns:
        The result of every command.
    """
    results: list[CommandResult] = []
    for step in plan:
        logger.debug("Running %s", step)
        results.append(runner.run(step.command, list(step.args), cwd=cwd))
    return results
