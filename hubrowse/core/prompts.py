"""Operator interaction used while resolving the target."""

from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Prompt


class PromptError(Exception):
    """Raised when the operator's answer cannot be read."""

    pass


class InteractivePrompt(Protocol):
    """Shows notices and asks free-text questions."""

    def notify(self, message: str) -> None: ...

    def ask(self, question: str) -> str: ...


class ConsolePrompt:
    """InteractivePrompt backed by a rich console.

    Notices go to stderr so that command output stays pipeable.
    """

    def __init__(self, console: Optional[Console] = None, hide_input: bool = True):
        self.console = console or Console(stderr=True)
        self.hide_input = hide_input

    def notify(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def ask(self, question: str) -> str:
        """Ask a question and return the stripped answer.

        Raises:
            PromptError: If input is closed or interrupted
        """
        try:
            answer = Prompt.ask(
                question, console=self.console, password=self.hide_input
            )
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptError("input was closed before an answer was given") from e
        return (answer or "").strip()
