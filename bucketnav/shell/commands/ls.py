"""
ls - List buckets, prefixes and objects.

    ls                  list the current location
    ls -l photos/2024   long listing (size, modification time)

At the root, lists buckets. Anywhere else, lists the immediate child
prefixes (shown with a trailing delimiter) followed by objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bucketnav.config.defaults import PATH_DELIMITER
from bucketnav.errors import CommandUsageError, TargetNotFoundError
from bucketnav.shell.commands.base import Command
from bucketnav.types import ListingEntry, TargetKind

if TYPE_CHECKING:
    from bucketnav.shell.output import Outputter

logger = logging.getLogger(__name__)

_FLAGS = {"-l": "long"}


def format_entry(entry: ListingEntry, *, long: bool = False) -> str:
    """Render one listing line."""
    if not long:
        return entry.name
    if entry.is_prefix:
        return f"{'PRE':>12}  {'':16}  {entry.name}"
    size = "" if entry.size is None else str(entry.size)
    modified = "" if entry.last_modified is None else entry.last_modified.strftime("%Y-%m-%d %H:%M")
    return f"{size:>12}  {modified:16}  {entry.name}"


class LsCommand(Command):
    """List the children of a location. Never changes the Context."""

    name = "ls"
    usage = "ls [-l] [path]"
    summary = "List buckets, prefixes and objects"

    def _parse(self) -> tuple[dict[str, bool], str]:
        options = {"long": False}
        paths: list[str] = []
        only_paths = False
        for arg in self.args:
            if only_paths or not arg.startswith("-") or arg == "-":
                paths.append(arg)
            elif arg == "--":
                only_paths = True
            elif arg in _FLAGS:
                options[_FLAGS[arg]] = True
            else:
                raise CommandUsageError(self.usage, f"Unknown option: {arg}")
        return options, paths[0] if paths else ""

    def execute(self, out: "Outputter") -> None:
        options, path = self._parse()
        resolved = self._resolve(path)
        location = resolved.location

        if resolved.kind is TargetKind.ROOT:
            entries = [
                ListingEntry(name=name + PATH_DELIMITER, is_prefix=True)
                for name in self.storage.list_buckets()
            ]
        else:
            entries = self.storage.list_entries(location.bucket, location.prefix)
            # a zero-byte folder marker is a prefix with no children
            if (
                not entries
                and resolved.kind is TargetKind.PREFIX
                and not self.storage.path_exists(location.bucket, location.prefix)
            ):
                raise TargetNotFoundError(location.bucket, location.prefix)

        logger.debug(f"ls {location}: {len(entries)} entries")
        if entries:
            out.write("\n".join(format_entry(e, long=options["long"]) for e in entries))

    def is_long_running(self) -> bool:
        try:
            _, path = self._parse()
        except CommandUsageError:
            return False
        return self._try_resolve(path) is not None


def new_ls(storage, context, args=None) -> LsCommand:
    """Construct an ls command."""
    return LsCommand(storage, context, args)
