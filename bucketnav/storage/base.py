"""
Abstract Storage Interface

Defines the capabilities the shell needs from an object-storage service.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bucketnav.types import ListingEntry


class StorageProbe(ABC):
    """
    Read-only existence checks against the storage service.

    This is all navigation needs. Implementations raise whatever their
    transport raises on failure; callers propagate those errors untouched.
    """

    @abstractmethod
    def bucket_exists(self, bucket: str) -> bool:
        """Return True if the bucket exists and is reachable."""
        ...

    @abstractmethod
    def path_exists(self, bucket: str, key: str) -> bool:
        """
        Return True if any object key in the bucket starts with key.

        During navigation key is always a delimiter-terminated prefix.
        """
        ...


class StorageClient(StorageProbe):
    """
    Existence checks plus the listings needed by ``ls``.

    All storage implementations (S3, in-memory) implement this interface.
    """

    @abstractmethod
    def list_buckets(self) -> list[str]:
        """Return bucket names, sorted."""
        ...

    @abstractmethod
    def list_entries(self, bucket: str, prefix: str = "") -> list["ListingEntry"]:
        """
        List the immediate children of a prefix.

        Child prefixes come first, then objects, each group sorted by name.
        Names are relative to prefix; child prefixes keep their trailing
        delimiter.
        """
        ...
