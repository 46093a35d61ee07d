"""pwd - Print the current location."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bucketnav.shell.commands.base import Command
from bucketnav.shell.path_resolver import format_location

if TYPE_CHECKING:
    from bucketnav.shell.output import Outputter


class PwdCommand(Command):
    name = "pwd"
    usage = "pwd"
    summary = "Print the current location"

    def execute(self, out: "Outputter") -> None:
        out.write(format_location(self.context.current))

    def is_long_running(self) -> bool:
        return False


def new_pwd(storage, context, args=None) -> PwdCommand:
    """Construct a pwd command."""
    return PwdCommand(storage, context, args)
