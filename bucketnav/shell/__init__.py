"""
Navigation Shell

Filesystem-style navigation over a flat bucket/key namespace.

Modules:
    context: Session state (current location)
    path_resolver: Pure path normalization
    commands/: Command contract and verbs (cd, ls, pwd)
    dispatcher: Line parsing, built-ins, progress gating
    output: Output sinks (rich console, in-memory buffer)
"""

from bucketnav.shell.context import Context
from bucketnav.shell.dispatcher import Dispatcher, parse_command
from bucketnav.shell.output import BufferOutputter, ConsoleOutputter, Outputter
from bucketnav.shell.path_resolver import format_location, resolve_path

__all__ = [
    "BufferOutputter",
    "ConsoleOutputter",
    "Context",
    "Dispatcher",
    "Outputter",
    "format_location",
    "parse_command",
    "resolve_path",
]
