"""
Navigation Errors

Domain errors raised by the resolver, the commands and the dispatcher.
Errors raised by the storage client are never wrapped in these; they reach
the caller unchanged so service failures stay distinguishable by type.
"""

from __future__ import annotations


class NavigationError(Exception):
    """Base class for bucketnav domain errors."""


class InvalidPathError(NavigationError):
    """The requested path is structurally impossible (e.g. ascending past root)."""

    def __init__(self, path: str, reason: str = "path ascends above the root") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class TargetNotFoundError(NavigationError):
    """The storage service reports that the bucket or prefix does not exist."""

    def __init__(self, bucket: str, prefix: str = "") -> None:
        self.bucket = bucket
        self.prefix = prefix
        if prefix:
            message = f"No such prefix: {prefix!r} in bucket {bucket!r}"
        else:
            message = f"No such bucket: {bucket!r}"
        super().__init__(message)


class CommandUsageError(NavigationError):
    """A command was given options or arguments it does not accept."""

    def __init__(self, usage: str, detail: str) -> None:
        self.usage = usage
        self.detail = detail
        super().__init__(f"{detail} (usage: {usage})")


class UnknownCommandError(NavigationError):
    """No command is registered for the given verb."""

    def __init__(self, verb: str) -> None:
        self.verb = verb
        super().__init__(f"Unknown command: {verb}. Type 'help' for available commands.")


__all__ = [
    "CommandUsageError",
    "InvalidPathError",
    "NavigationError",
    "TargetNotFoundError",
    "UnknownCommandError",
]
