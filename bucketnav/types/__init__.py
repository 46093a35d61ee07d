"""
Type Definitions

Pydantic models shared by the resolver, the commands and the storage layer.

Navigation Models:
    - Location, TargetKind - Absolute position in the namespace
    - ResolvedTarget - Output of path resolution

Storage Models:
    - ListingEntry - Child entry of a listed bucket or prefix
"""

from bucketnav.types.listing import ListingEntry
from bucketnav.types.location import Location, ResolvedTarget, TargetKind

__all__ = [
    "ListingEntry",
    "Location",
    "ResolvedTarget",
    "TargetKind",
]
