"""
Shell Commands

One Command subclass per verb, all built the same way:

    command = build_command("cd", storage, context, ["photos/2024"])
    if command.is_long_running():
        ...  # show a spinner
    command.execute(outputter)

Adding a verb means adding a module with a Command subclass and an entry
in COMMANDS; existing commands are untouched.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from bucketnav.errors import UnknownCommandError
from bucketnav.shell.commands.base import Command
from bucketnav.shell.commands.cd import CdCommand, new_cd
from bucketnav.shell.commands.ls import LsCommand, new_ls
from bucketnav.shell.commands.pwd import PwdCommand, new_pwd

if TYPE_CHECKING:
    from bucketnav.shell.context import Context
    from bucketnav.storage.base import StorageClient

COMMANDS: dict[str, type[Command]] = {
    CdCommand.name: CdCommand,
    LsCommand.name: LsCommand,
    PwdCommand.name: PwdCommand,
}


def build_command(
    verb: str,
    storage: "StorageClient",
    context: "Context",
    args: Sequence[str] | None = None,
    commands: dict[str, type[Command]] | None = None,
) -> Command:
    """Construct the command registered for verb."""
    registry = COMMANDS if commands is None else commands
    command_cls = registry.get(verb)
    if command_cls is None:
        raise UnknownCommandError(verb)
    return command_cls(storage, context, args)


__all__ = [
    "COMMANDS",
    "CdCommand",
    "Command",
    "LsCommand",
    "PwdCommand",
    "build_command",
    "new_cd",
    "new_ls",
    "new_pwd",
]
