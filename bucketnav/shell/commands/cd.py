"""
cd - Change the current location.

    cd                  stay where you are
    cd /                go to the namespace root
    cd photos           enter bucket "photos" (from the root)
    cd 2024/summer      enter a prefix, relative to the current location
    cd ..               go up one level
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from bucketnav.errors import TargetNotFoundError
from bucketnav.shell.commands.base import Command
from bucketnav.types import TargetKind

if TYPE_CHECKING:
    from bucketnav.shell.context import Context
    from bucketnav.shell.output import Outputter
    from bucketnav.storage.base import StorageClient

logger = logging.getLogger(__name__)


class CdCommand(Command):
    """Navigate to a bucket or prefix after confirming it exists."""

    name = "cd"
    usage = "cd [path]"
    summary = "Change the current bucket/prefix"

    @property
    def target(self) -> str:
        """The path argument ("" when none was given). Extra arguments are ignored."""
        return self.args[0] if self.args else ""

    def execute(self, out: "Outputter") -> None:
        if not self.target:
            return

        resolved = self._resolve(self.target)
        location = resolved.location

        if resolved.kind is TargetKind.BUCKET:
            exists = self.storage.bucket_exists(location.bucket)
        elif resolved.kind is TargetKind.PREFIX:
            exists = self.storage.path_exists(location.bucket, location.prefix)
        else:
            exists = True

        if not exists:
            logger.debug(f"cd target missing: {location}")
            raise TargetNotFoundError(location.bucket, location.prefix)

        self.context.commit(location)

    def is_long_running(self) -> bool:
        if not self.target:
            return False
        resolved = self._try_resolve(self.target)
        return resolved is not None and resolved.requires_probe


def new_cd(
    storage: "StorageClient",
    context: "Context",
    args: Sequence[str] | None = None,
) -> CdCommand:
    """Construct a cd command."""
    return CdCommand(storage, context, args)
