"""Interactive prompts, behind an interface so operations can be driven in tests."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class Prompter(Protocol):
    """Asks the user a question and returns the raw answer."""

    def ask(self, message: str) -> str: ...


class ConsolePrompter:
    """Prompter that reads answers from the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(markup=False, highlight=False)

    def ask(self, message: str) -> str:
        try:
            answer = self.console.input(message, markup=False)
        except EOFError:
            answer = ""
        return answer.strip()
