"""Create-Vite-Starter: scaffold new Vite + React projects.

Basic usage:
    $ create-vite-starter my-project

Programmatic usage:
    from create_vite_starter import RichPrompter, ScaffoldConfig, ScaffoldOrchestrator, SubprocessRunner

    orchestrator = ScaffoldOrchestrator(
        config=ScaffoldConfig(),
        prompter=RichPrompter(),
        runner=SubprocessRunner(),
    )
    exit_code = orchestrator.run(["my-project"])
"""

import logging

from create_vite_starter.config import ScaffoldConfig
from create_vite_starter.detector import PackageManager, detect_package_manager
from create_vite_starter.executor import InstallCommand, plan_install
from create_vite_starter.orchestrator import ScaffoldOptions, ScaffoldOrchestrator, ScaffoldState
from create_vite_starter.process import ProcessRunner, SubprocessRunner
from create_vite_starter.prompts import Prompter, RichPrompter, StaticPrompter

__all__ = (
    "InstallCommand",
    "PackageManager",
    "ProcessRunner",
    "Prompter",
    "RichPrompter",
    "ScaffoldConfig",
    "ScaffoldOptions",
    "ScaffoldOrchestrator",
    "ScaffoldState",
    "StaticPrompter",
    "SubprocessRunner",
    "detect_package_manager",
    "plan_install",
)

logging.getLogger("create_vite_starter").addHandler(logging.NullHandler())
