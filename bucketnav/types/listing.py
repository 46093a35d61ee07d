"""
Listing Types

Entries returned by storage listings and rendered by ``ls``.
"""

from datetime import datetime

from pydantic import BaseModel


class ListingEntry(BaseModel):
    """
    One child of a listed location.

    Attributes:
        name: Name relative to the listed prefix (prefixes keep their
            trailing delimiter)
        is_prefix: True for "directories" (common prefixes and buckets)
        size: Object size in bytes (None for prefixes)
        last_modified: Object modification time (None for prefixes)
    """

    name: str
    is_prefix: bool = False
    size: int | None = None
    last_modified: datetime | None = None
