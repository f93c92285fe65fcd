"""Interactive prompts.

The scaffolding flow asks questions through the :class:`Prompter` protocol;
:class:`RichPrompter` implements it on top of ``rich.prompt`` and
:class:`StaticPrompter` answers from fixed values.
"""

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_vite_starter.exceptions import CancelledInputError

__all__ = ("Prompter", "RichPrompter", "StaticPrompter")


@runtime_checkable
class Prompter(Protocol):
    """Asks the user for text and yes/no answers.

    Implementations raise :class:`CancelledInputError` when the user aborts.
    """

    def text(self, message: str, placeholder: "str | None" = None) -> str: ...

    def confirm(self, message: str, default: bool = True) -> bool: ...


class RichPrompter:
    """Terminal prompts rendered with rich."""

    def __init__(self, console: "Console | None" = None) -> None:
        self.console = console

    def text(self, message: str, placeholder: "str | None" = None) -> str:
        # The placeholder is only a hint; an empty answer cancels.
        prompt = f"{message} [dim]({escape(placeholder)})[/]" if placeholder else message
        try:
            answer = Prompt.ask(prompt, console=self.console)
        except (KeyboardInterrupt, EOFError) as e:
            raise CancelledInputError from e
        if not answer or not answer.strip():
            raise CancelledInputError
        return answer.strip()

    def confirm(self, message: str, default: bool = True) -> bool:
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except (KeyboardInterrupt, EOFError) as e:
            raise CancelledInputError from e


class StaticPrompter:
    """Prompter answering from preset values.

    Questions are matched by message; unanswered text questions cancel and
    unanswered confirmations fall back to their default. Every question asked
    is recorded in ``asked``.
    """

    def __init__(self, answers: "dict[str, str | bool | None] | None" = None) -> None:
        self.answers = answers or {}
        self.asked: list[str] = []

    def text(self, message: str, placeholder: "str | None" = None) -> str:
        self.asked.append(message)
        answer = self.answers.get(message)
        if not isinstance(answer, str) or not answer.strip():
            raise CancelledInputError
        return answer.strip()

    def confirm(self, message: str, default: bool = True) -> bool:
        self.asked.append(message)
        answer = self.answers.get(message, default)
        if answer is None:
            raise CancelledInputError
        return bool(answer)
