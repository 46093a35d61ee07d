"""
In-Memory Storage

A dict-backed StorageClient for offline sessions and tests.

Example:
    >>> storage = InMemoryStorage({"photos": ["2024/beach.jpg", "readme.txt"]})
    >>> storage.path_exists("photos", "2024/")
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from bucketnav.config.defaults import PATH_DELIMITER
from bucketnav.errors import TargetNotFoundError
from bucketnav.storage.base import StorageClient
from bucketnav.types import ListingEntry

logger = logging.getLogger(__name__)


class InMemoryStorage(StorageClient):
    """
    Storage backed by a mapping of bucket name to object keys.

    Object sizes are the byte length of the stored content ("" by default).
    """

    def __init__(self, buckets: Mapping[str, Iterable[str]] | None = None) -> None:
        self._buckets: dict[str, dict[str, bytes]] = {}
        self._modified: dict[tuple[str, str], datetime] = {}
        for bucket, keys in (buckets or {}).items():
            self.create_bucket(bucket)
            for key in keys:
                self.put_object(bucket, key)

    def create_bucket(self, bucket: str) -> None:
        if PATH_DELIMITER in bucket or not bucket:
            raise ValueError(f"Invalid bucket name: {bucket!r}")
        self._buckets.setdefault(bucket, {})

    def put_object(self, bucket: str, key: str, body: bytes = b"") -> None:
        if bucket not in self._buckets:
            raise TargetNotFoundError(bucket)
        self._buckets[bucket][key] = body
        self._modified[(bucket, key)] = datetime.now(timezone.utc)

    # -------------------------------------------------------------------------
    # StorageProbe
    # -------------------------------------------------------------------------

    def bucket_exists(self, bucket: str) -> bool:
        return bucket in self._buckets

    def path_exists(self, bucket: str, key: str) -> bool:
        objects = self._buckets.get(bucket)
        if objects is None:
            return False
        return any(k.startswith(key) for k in objects)

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_buckets(self) -> list[str]:
        return sorted(self._buckets)

    def list_entries(self, bucket: str, prefix: str = "") -> list[ListingEntry]:
        if bucket not in self._buckets:
            raise TargetNotFoundError(bucket)

        prefixes: set[str] = set()
        objects: list[ListingEntry] = []
        for key, body in self._buckets[bucket].items():
            if not key.startswith(prefix) or key == prefix:
                continue
            rest = key[len(prefix):]
            head, sep, _ = rest.partition(PATH_DELIMITER)
            if sep:
                prefixes.add(head + PATH_DELIMITER)
            else:
                objects.append(ListingEntry(
                    name=rest,
                    size=len(body),
                    last_modified=self._modified[(bucket, key)],
                ))

        logger.debug(
            f"Listed {bucket}/{prefix}: {len(prefixes)} prefixes, {len(objects)} objects"
        )
        return [
            *(ListingEntry(name=p, is_prefix=True) for p in sorted(prefixes)),
            *sorted(objects, key=lambda e: e.name),
        ]
