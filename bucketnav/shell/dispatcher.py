"""
Command Dispatcher

Reads one command line at a time, builds the matching Command, and runs it
to completion before accepting the next line. Long-running commands run
inside an optional progress context (the CLI passes a rich spinner).

Built-ins handled here rather than as commands:
    help        list available commands
    exit, quit  end the session
"""

from __future__ import annotations

import contextlib
import logging
import shlex
from collections.abc import Callable
from typing import TYPE_CHECKING, ContextManager

from bucketnav.errors import UnknownCommandError
from bucketnav.shell.commands import COMMANDS, Command, build_command

if TYPE_CHECKING:
    from bucketnav.shell.context import Context
    from bucketnav.shell.output import Outputter
    from bucketnav.storage.base import StorageClient

logger = logging.getLogger(__name__)

ProgressFactory = Callable[[str], ContextManager[object]]

EXIT_COMMANDS = frozenset({"exit", "quit"})


def parse_command(command: str) -> tuple[str, list[str]]:
    """Parse a command string into (cmd_name, args)."""
    stripped = command.strip()
    if not stripped:
        raise ValueError("Empty command")
    parts = stripped.split(maxsplit=1)
    cmd_name = parts[0].lower()
    arg_text = parts[1] if len(parts) > 1 else ""
    return cmd_name, shlex.split(arg_text)


class Dispatcher:
    """
    Runs command lines against one session.

    Args:
        storage: Storage client handed to every command
        context: The session Context
        outputter: Sink for command output and outcome reports
        progress: Factory for a context manager wrapped around long-running
            commands; receives a description of the command
        commands: Verb registry (defaults to COMMANDS)
    """

    def __init__(
        self,
        storage: "StorageClient",
        context: "Context",
        outputter: "Outputter",
        progress: ProgressFactory | None = None,
        commands: dict[str, type[Command]] | None = None,
    ) -> None:
        self.storage = storage
        self.context = context
        self.outputter = outputter
        self.progress = progress
        self.commands = COMMANDS if commands is None else commands

    def dispatch(self, line: str) -> bool:
        """
        Execute one command line and report its outcome.

        Returns:
            False when the session should end, True otherwise
        """
        if not line.strip():
            return True

        try:
            verb, args = parse_command(line)
        except ValueError as e:
            # shlex: unbalanced quotes
            self.outputter.report(e)
            return True

        if verb in EXIT_COMMANDS:
            return False

        if verb == "help":
            self.outputter.write(self.help_text())
            self.outputter.report(None)
            return True

        try:
            command = build_command(verb, self.storage, self.context, args, self.commands)
        except UnknownCommandError as e:
            self.outputter.report(e)
            return True

        self.outputter.report(self.run(command, description=line.strip()))
        return True

    def run(self, command: Command, description: str = "") -> BaseException | None:
        """
        Run a command, returning the exception it raised (unchanged) or None.

        A KeyboardInterrupt while the command runs (Ctrl-C during a slow
        storage call) is returned like any other failure, so it cancels the
        command without ending the session.
        """
        if command.is_long_running() and self.progress is not None:
            scope = self.progress(description or command.name)
        else:
            scope = contextlib.nullcontext()

        try:
            with scope:
                command.execute(self.outputter)
        except (Exception, KeyboardInterrupt) as e:
            logger.debug(f"{command!r} failed: {type(e).__name__}: {e}")
            return e
        return None

    def help_text(self) -> str:
        width = max(len(cls.usage) for cls in self.commands.values())
        lines = ["Available commands:"]
        for name in sorted(self.commands):
            cls = self.commands[name]
            lines.append(f"  {cls.usage:<{width}}  {cls.summary}")
        lines.append(f"  {'help':<{width}}  Show this help")
        lines.append(f"  {'exit':<{width}}  Leave the shell")
        return "\n".join(lines)
