"""
Command Contract

Every shell verb is a Command subclass constructed from the same three
things: a storage client, the session Context, and the raw argument list.

Contract:
    - execute(out) returns None on success and raises on failure. Errors
      from storage are re-raised untouched; domain failures are
      InvalidPathError / TargetNotFoundError.
    - is_long_running() is decided from the arguments and the current
      Context alone. It never touches the network, so the dispatcher can
      show progress before execute() starts.
    - The Context changes only through one commit, after every check has
      passed. A failing command leaves it exactly as it was.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from bucketnav.errors import InvalidPathError
from bucketnav.shell.path_resolver import resolve_path

if TYPE_CHECKING:
    from bucketnav.shell.context import Context
    from bucketnav.shell.output import Outputter
    from bucketnav.storage.base import StorageClient
    from bucketnav.types import ResolvedTarget


class Command(ABC):
    """Base class for all shell commands."""

    name: ClassVar[str]
    usage: ClassVar[str]
    summary: ClassVar[str]

    def __init__(
        self,
        storage: "StorageClient",
        context: "Context",
        args: Sequence[str] | None = None,
    ) -> None:
        self.storage = storage
        self.context = context
        self.args: list[str] = list(args or [])

    @abstractmethod
    def execute(self, out: "Outputter") -> None:
        """Run the command, writing results to out."""
        ...

    @abstractmethod
    def is_long_running(self) -> bool:
        """Whether execute() will wait on the storage service."""
        ...

    # -------------------------------------------------------------------------
    # Helpers for path-taking commands
    # -------------------------------------------------------------------------

    def _resolve(self, raw: str) -> "ResolvedTarget":
        return resolve_path(self.context.current, raw)

    def _try_resolve(self, raw: str) -> "ResolvedTarget | None":
        """Resolve without raising; used where only the classification matters."""
        try:
            return self._resolve(raw)
        except InvalidPathError:
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(args={self.args!r})"
