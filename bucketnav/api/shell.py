"""
NavShell - Filesystem-Style Navigation Interface

Presents an object store as a virtual filesystem navigable with familiar
commands. Usable from Python directly, and the engine behind the MCP tool.

Virtual Filesystem Structure:
    /
    ├── photos/               # bucket
    │   ├── 2024/             # prefix "2024/"
    │   │   └── beach.jpg     # object "2024/beach.jpg"
    │   └── readme.txt
    └── backups/
        └── ...

Commands:
    pwd     - Print working directory
    cd      - Change directory (bucket or prefix)
    ls      - List directory contents

Example:
    >>> shell = NavShell(S3Storage.from_config(NavConfig()))
    >>> shell.cd("photos/2024")
    '/photos/2024/'
    >>> print(shell.ls(long=True))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bucketnav.config import NavConfig
from bucketnav.shell.commands import CdCommand, LsCommand
from bucketnav.shell.context import Context
from bucketnav.shell.dispatcher import Dispatcher
from bucketnav.shell.output import BufferOutputter
from bucketnav.shell.path_resolver import format_location

if TYPE_CHECKING:
    from bucketnav.storage.base import StorageClient


class NavShell:
    """
    Interactive shell for navigating an object store.

    Navigation methods raise on failure; execute() never raises and
    returns errors as text, which is what agents and scripts want.
    """

    def __init__(
        self,
        storage: "StorageClient",
        config: NavConfig | None = None,
        context: Context | None = None,
    ) -> None:
        """Initialize shell for a storage client."""
        self._storage = storage
        self._config = config or NavConfig()
        self._context = context or Context()
        self._history: list[str] = []

    @property
    def context(self) -> Context:
        return self._context

    @property
    def config(self) -> NavConfig:
        return self._config

    # === Navigation ===

    def pwd(self) -> str:
        """Print working directory."""
        return format_location(self._context.current)

    def cd(self, path: str = "") -> str:
        """
        Change directory.

        Args:
            path: Absolute (/photos/2024/) or relative (../backups) path

        Returns:
            New working directory path

        Raises:
            InvalidPathError: If the path ascends above the root
            TargetNotFoundError: If the bucket or prefix doesn't exist
        """
        CdCommand(self._storage, self._context, [path]).execute(BufferOutputter())
        return self.pwd()

    def ls(self, path: str | None = None, *, long: bool = False) -> str:
        """
        List directory contents.

        Args:
            path: Path to list (default: current directory)
            long: Show size and modification time (-l flag)
        """
        args = ["-l"] if long else []
        if path:
            args.extend(["--", path])
        out = BufferOutputter()
        LsCommand(self._storage, self._context, args).execute(out)
        return out.getvalue()

    def back(self) -> str:
        """Go to previous directory (cd -)."""
        previous = self._context.previous
        if previous is not None:
            return self.cd(format_location(previous))
        return self.pwd()

    # === Session Management ===

    def history(self, limit: int = 20) -> list[str]:
        """Get command history for this session."""
        return self._history[-limit:]

    # === Execution ===

    def execute(self, command: str) -> str:
        """
        Execute a shell command string.

        Parses and executes commands like "ls -l photos/" or "cd ..".
        Errors are returned as "Error: ..." lines rather than raised.
        """
        self._history.append(command)
        out = BufferOutputter()
        dispatcher = Dispatcher(self._storage, self._context, out)
        if not dispatcher.dispatch(command):
            return "Session commands (exit/quit) have no effect here."
        return out.getvalue()

    def execute_batch(self, commands: list[str]) -> list[str]:
        """Execute multiple commands, returning all outputs."""
        return [self.execute(cmd) for cmd in commands]
