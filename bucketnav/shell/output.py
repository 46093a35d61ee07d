"""
Output Sinks

Where commands write their results and where the dispatcher reports
success or failure. Formatting belongs here, not in commands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape

from bucketnav.errors import NavigationError


class Outputter(ABC):
    """Sink for command output and outcome reports."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write one block of command output."""
        ...

    @abstractmethod
    def report(self, error: BaseException | None) -> None:
        """Report the outcome of a command (None means success)."""
        ...


def describe_error(error: BaseException) -> str:
    """One-line description; service errors are labelled with their type."""
    if isinstance(error, NavigationError):
        return str(error)
    if isinstance(error, KeyboardInterrupt):
        return "Interrupted"
    return f"{type(error).__name__}: {error}"


class ConsoleOutputter(Outputter):
    """Renders through a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.error_count = 0

    def write(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def report(self, error: BaseException | None) -> None:
        if error is None:
            return
        self.error_count += 1
        self.console.print(f"[red]Error:[/] {escape(describe_error(error))}")


class BufferOutputter(Outputter):
    """Collects output in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[BaseException] = []

    def write(self, text: str) -> None:
        self.lines.append(text)

    def report(self, error: BaseException | None) -> None:
        if error is not None:
            self.errors.append(error)
            self.lines.append(f"Error: {describe_error(error)}")

    def getvalue(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
        self.errors.clear()
