"""
Path Resolution

Turns a user-supplied path into an absolute Location. Pure: no I/O and no
failure mode besides structurally impossible input.

Rules:
    ""            -> current location, unchanged
    "/"           -> namespace root
    "/a/b"        -> absolute, first segment is the bucket
    "b", "../c"   -> relative to the current [bucket, *prefix] chain
    "." and empty segments are skipped; ".." pops one segment
    popping an empty chain -> InvalidPathError (never clamped to root)
"""

from __future__ import annotations

import logging

from bucketnav.config.defaults import CURRENT_SEGMENT, PARENT_SEGMENT, PATH_DELIMITER
from bucketnav.errors import InvalidPathError
from bucketnav.types import Location, ResolvedTarget

logger = logging.getLogger(__name__)


def normalize_segments(base: list[str], raw: str) -> list[str]:
    """Apply the segments of raw on top of base, returning a new chain."""
    chain = list(base)
    for segment in raw.split(PATH_DELIMITER):
        if not segment or segment == CURRENT_SEGMENT:
            continue
        if segment == PARENT_SEGMENT:
            if not chain:
                raise InvalidPathError(raw)
            chain.pop()
        else:
            chain.append(segment)
    return chain


def resolve_path(current: Location, raw: str) -> ResolvedTarget:
    """
    Resolve raw against current.

    Args:
        current: The session's current location
        raw: Path as typed by the user (absolute or relative)

    Returns:
        ResolvedTarget with the absolute location and its classification

    Raises:
        InvalidPathError: If the path ascends above the namespace root
    """
    if not raw:
        return ResolvedTarget(location=current, kind=current.kind)

    if raw == PATH_DELIMITER:
        root = Location.root()
        return ResolvedTarget(location=root, kind=root.kind)

    base = [] if raw.startswith(PATH_DELIMITER) else current.segments
    location = Location.from_segments(normalize_segments(base, raw))

    logger.debug(f"Resolved {raw!r} from {current} to {location} ({location.kind.value})")
    return ResolvedTarget(location=location, kind=location.kind)


def format_location(location: Location) -> str:
    """Display path for a location ("/", "/bucket/", "/bucket/a/")."""
    return location.path
