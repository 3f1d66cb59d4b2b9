"""Interactive prompting — ask the user for a string or a yes/no answer."""

from __future__ import annotations

import abc

from rich.console import Console
from rich.prompt import Confirm, Prompt


class Prompter(abc.ABC):
    """Base class for prompting collaborators."""

    @abc.abstractmethod
    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Ask a yes/no question."""

    @abc.abstractmethod
    def text(self, prompt: str, default: str = "") -> str:
        """Ask for a line of text; an empty answer returns *default*."""


class ConsolePrompter(Prompter):
    """Terminal prompter backed by :mod:`rich.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, default=default, console=self.console)

    def text(self, prompt: str, default: str = "") -> str:
        return Prompt.ask(prompt, default=default, console=self.console)
