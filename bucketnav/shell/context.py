"""
Session Context

Holds the current location for one shell session. Commands read
``context.current`` freely but change it only through ``commit``, once,
after every check has passed.
"""

from __future__ import annotations

import logging
import threading

from bucketnav.types import Location

logger = logging.getLogger(__name__)


class Context:
    """
    Mutable session state owning exactly one current Location.

    The lock makes a commit an atomic swap of the whole Location. A single
    session never runs two commands at once, so it is only ever contended
    when several pipelines share one context.
    """

    def __init__(self, location: Location | None = None) -> None:
        self._current = location if location is not None else Location.root()
        self._previous: Location | None = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Location:
        return self._current

    @property
    def previous(self) -> Location | None:
        """Location replaced by the last commit, if any."""
        return self._previous

    def commit(self, location: Location) -> None:
        """Replace the current location."""
        if not isinstance(location, Location):
            raise TypeError(f"Expected Location, got {type(location).__name__}")
        with self._lock:
            previous = self._current
            self._previous, self._current = previous, location
        logger.debug(f"Context moved {previous} -> {location}")

    def __repr__(self) -> str:
        return f"Context(current={self._current.path!r})"
