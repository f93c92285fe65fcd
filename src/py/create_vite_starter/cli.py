from typing import Optional

from click import Context, argument, command, option, pass_context, version_option

from create_vite_starter.__metadata__ import __version__


def _configure_logging(verbose: bool) -> None:
    import logging

    from rich.logging import RichHandler

    from create_vite_starter.utils import console

    logger = logging.getLogger("create_vite_starter")
    if not verbose:
        return
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@command(
    name="create-vite-starter",
    help="Create a new Vite + React project in TARGET (prompted for when omitted).",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@argument("target", required=False, default=None)
@option(
    "--git/--no-git",
    "git",
    default=None,
    help="Initialize a git repository without prompting.",
    show_default=False,
)
@option(
    "--install/--no-install",
    "install",
    default=None,
    help="Install dependencies without prompting.",
    show_default=False,
)
@option(
    "--router/--no-router",
    "router",
    default=None,
    help="Add TanStack Router without prompting.",
    show_default=False,
)
@option(
    "--no-prompt",
    help="Do not prompt; use the current directory, initialize git, install dependencies and skip the router.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(__version__, "--version", "-V")
@pass_context
def create_vite_starter(
    ctx: "Context",
    target: "Optional[str]",
    git: "Optional[bool]",
    install: "Optional[bool]",
    router: "Optional[bool]",
    no_prompt: "bool",
    verbose: "bool",
) -> None:
    """Scaffold a new Vite project."""
    from create_vite_starter.config import ScaffoldConfig
    from create_vite_starter.orchestrator import TARGET_PROMPT, ScaffoldOptions, ScaffoldOrchestrator
    from create_vite_starter.process import SubprocessRunner
    from create_vite_starter.prompts import Prompter, RichPrompter, StaticPrompter
    from create_vite_starter.utils import console

    _configure_logging(verbose)

    prompter: Prompter = StaticPrompter({TARGET_PROMPT: "."}) if no_prompt else RichPrompter(console=console)
    if no_prompt:
        git = True if git is None else git
        install = True if install is None else install
        router = False if router is None else router

    orchestrator = ScaffoldOrchestrator(
        config=ScaffoldConfig(),
        prompter=prompter,
        runner=SubprocessRunner(),
        options=ScaffoldOptions(git=git, install=install, addon=router),
        console=console,
    )
    ctx.exit(orchestrator.run([target] if target else []))


def main() -> None:
    """Console script entry point."""
    create_vite_starter()
