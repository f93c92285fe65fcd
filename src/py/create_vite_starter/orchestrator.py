"""Scaffolding orchestration.

:class:`ScaffoldOrchestrator` sequences a scaffolding run: resolve and
validate the target, collect options, copy the template, then the optional
add-on, repository and install steps. Only target and copy failures end the
run early; failures of the optional steps are reported and the run carries on.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from create_vite_starter.detector import PackageManager, detect_package_manager
from create_vite_starter.exceptions import (
    AddonMissingError,
    CancelledInputError,
    CopyFailureError,
    DirectoryConflictError,
    ExecutableNotFoundError,
    ExecutionError,
)
from create_vite_starter.executor import get_executor, plan_install, run_install_plan
from create_vite_starter.scaffolding import AddonType, get_addon, inject_addon, materialize_project, validate_target
from create_vite_starter.utils import console as default_console

if TYPE_CHECKING:
    from rich.console import Console

    from create_vite_starter.config import ScaffoldConfig
    from create_vite_starter.process import ProcessRunner
    from create_vite_starter.prompts import Prompter
    from create_vite_starter.scaffolding import AddonTemplate

__all__ = (
    "ADDON_PROMPT",
    "GIT_PROMPT",
    "INSTALL_PROMPT",
    "TARGET_PROMPT",
    "ScaffoldOptions",
    "ScaffoldOrchestrator",
    "ScaffoldState",
)

logger = logging.getLogger("create_vite_starter")

TARGET_PROMPT = "Where would you like to create your project?"
GIT_PROMPT = "Would you like to initialize a git repository?"
INSTALL_PROMPT = "Would you like to install dependencies?"
ADDON_PROMPT = "Would you like to add TanStack Router?"


class ScaffoldState(str, Enum):
    """Steps of a scaffolding run."""

    RESOLVING_TARGET = "resolving-target"
    VALIDATING_TARGET = "validating-target"
    COLLECTING_OPTIONS = "collecting-options"
    MATERIALIZING = "materializing"
    INJECTING_ADDON = "injecting-addon"
    GIT_INIT = "git-init"
    INSTALLING = "installing"
    REPORTING_NEXT_STEPS = "reporting-next-steps"
    TERMINAL = "terminal"


@dataclass
class ScaffoldOptions:
    """Answers that skip the matching prompt when set.

    Attributes:
        git: Initialize a git repository.
        install: Install dependencies.
        addon: Apply the routing add-on.
    """

    git: "bool | None" = None
    install: "bool | None" = None
    addon: "bool | None" = None


@dataclass
class _Selection:
    git: bool
    install: bool
    addon: bool


@dataclass
class _Outcome:
    addon_applied: bool = False
    installed: bool = False


class ScaffoldOrchestrator:
    """Runs the scaffolding pipeline for a single project."""

    def __init__(
        self,
        config: "ScaffoldConfig",
        prompter: "Prompter",
        runner: "ProcessRunner",
        options: "ScaffoldOptions | None" = None,
        console: "Console | None" = None,
        addon: "AddonTemplate | None" = None,
    ) -> None:
        self.config = config
        self.prompter = prompter
        self.runner = runner
        self.options = options or ScaffoldOptions()
        self.console = console or default_console
        self.addon = addon or get_addon(AddonType.ROUTER)
        self.state = ScaffoldState.RESOLVING_TARGET
        self.history: list[ScaffoldState] = [self.state]
        self.warnings: list[str] = []
        self.target: "Path | None" = None
        self.package_manager: "PackageManager | None" = None

    def _transition(self, state: ScaffoldState) -> None:
        logger.debug("Scaffold state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def _warn(self, message: str) -> None:
        logger.warning("%s", message)
        self.warnings.append(message)
        self.console.print(f"[yellow]{escape(message)}[/]")

    def run(self, argv: "list[str]") -> int:
        """Scaffold a project.

        Args:
            argv: Command arguments; the first one, if any, is the target directory.

        Returns:
            The process exit code.
        """
        self.console.rule("[yellow]Create Vite Starter[/]", align="left")
        try:
            target = self._resolve_target(argv)
            self._transition(ScaffoldState.VALIDATING_TARGET)
            validate_target(target)
            self._transition(ScaffoldState.COLLECTING_OPTIONS)
            selection = self._collect_options()
            self.package_manager = detect_package_manager(self.config.user_agent, self.config.cwd)
            self._transition(ScaffoldState.MATERIALIZING)
            self._materialize(target)
        except CancelledInputError:
            self.console.print("[red]Operation cancelled.[/]")
            self._transition(ScaffoldState.TERMINAL)
            return 1
        except (DirectoryConflictError, CopyFailureError) as e:
            logger.error("Scaffolding failed: %s", e)
            self.console.print(f"[bold red]{escape(str(e))}[/]")
            self._transition(ScaffoldState.TERMINAL)
            return 1

        outcome = _Outcome()
        if selection.addon:
            self._transition(ScaffoldState.INJECTING_ADDON)
            outcome.addon_applied = self._inject_addon(target)
        if selection.git:
            self._transition(ScaffoldState.GIT_INIT)
            self._git_init(target)
        if selection.install:
            self._transition(ScaffoldState.INSTALLING)
            outcome.installed = self._install(target, with_addon=outcome.addon_applied)

        self._transition(ScaffoldState.REPORTING_NEXT_STEPS)
        self._report_next_steps(target, installed=outcome.installed)
        self._transition(ScaffoldState.TERMINAL)
        return 0

    def _resolve_target(self, argv: "list[str]") -> Path:
        raw_target = argv[0] if argv else None
        if not raw_target:
            raw_target = self.prompter.text(TARGET_PROMPT, placeholder=".")
        self.target = self.config.resolve_target(raw_target)
        return self.target

    def _collect_options(self) -> _Selection:
        git = self.options.git
        if git is None:
            git = self.prompter.confirm(GIT_PROMPT)
        install = self.options.install
        if install is None:
            install = self.prompter.confirm(INSTALL_PROMPT)
        addon = self.options.addon
        if addon is None:
            addon = self.prompter.confirm(ADDON_PROMPT, default=False)
        return _Selection(git=git, install=install, addon=addon)

    def _materialize(self, target: Path) -> None:
        with self.console.status("Creating project structure"):
            try:
                materialize_project(self.config.template_dir, target)
            except CopyFailureError:
                self.console.print("[red]Failed to create project structure[/]")
                raise
        self.console.print("[green]Project structure created[/]")

    def _inject_addon(self, target: Path) -> bool:
        if self.addon is None:  # pragma: no cover
            return False
        with self.console.status(f"Adding {self.addon.name}"):
            try:
                inject_addon(self.config.addon_dir, target, self.addon)
            except AddonMissingError as e:
                self._warn(f"{e!s} Skipping add-on.")
                return False
            except CopyFailureError as e:
                self._warn(f"Failed to add {self.addon.name}: {e!s}")
                return False
        self.console.print(f"[green]{self.addon.name} added[/]")
        return True

    def _git_init(self, target: Path) -> None:
        with self.console.status("Initializing git repository"):
            try:
                self.runner.run(self.config.git_executable, ["init", str(target)], cwd=target)
            except (ExecutableNotFoundError, ExecutionError) as e:
                logger.warning("git init failed: %s", e)
                self.console.print("[red]Failed to initialize git repository[/]")
                self.console.print(f"[red]{escape(str(e))}[/]")
                return
        self.console.print("[green]Git repository initialized[/]")

    def _install(self, target: Path, *, with_addon: bool) -> bool:
        manager = self.package_manager or PackageManager.NPM
        plan = plan_install(manager, self.addon if with_addon else None)
        with self.console.status(f"Installing dependencies with {manager.value}"):
            try:
                run_install_plan(plan, self.runner, target)
            except (ExecutableNotFoundError, ExecutionError) as e:
                logger.warning("Dependency installation failed: %s", e)
                self.console.print("[red]Failed to install dependencies[/]")
                self.console.print(f"[red]{escape(str(e))}[/]")
                return False
        self.console.print("[green]Dependencies installed[/]")
        return True

    def next_steps(self, target: Path, *, installed: bool) -> list[str]:
        """Commands the user runs next to start the dev server.

        Args:
            target: The project directory.
            installed: Whether dependencies were installed successfully.

        Returns:
            The commands, in order.
        """
        executor = get_executor(self.package_manager or PackageManager.NPM)
        steps: list[str] = []
        if target != self.config.cwd:
            steps.append(f"cd {os.path.relpath(target, self.config.cwd)}")
        if not installed:
            steps.append(f"{executor.bin_name} install")
        steps.append(str(executor.run_command("dev")))
        return steps

    def _report_next_steps(self, target: Path, *, installed: bool) -> None:
        self.console.rule("[green]Project created successfully![/]", align="left")
        self.console.print("\nNext steps:")
        for step in self.next_steps(target, installed=installed):
            self.console.print(f"  [bold]{escape(step)}[/]", highlight=False)
        self.console.print()
