"""
S3 Storage Backend

StorageClient implementation over a boto3 S3 client. Works with AWS and
S3-compatible services (MinIO, Ceph RGW, ...) through endpoint_url.

Error policy:
    "Not found" answers become False. Every other ClientError (access
    denied, throttling, ...) and every BotoCoreError (timeouts, connection
    failures) propagates unchanged. Retries are configured on the client,
    never performed here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import ClientError

from bucketnav.config.defaults import DEFAULT_LIST_PAGE_SIZE, PATH_DELIMITER
from bucketnav.storage.base import StorageClient
from bucketnav.types import ListingEntry

if TYPE_CHECKING:
    from bucketnav.config import NavConfig

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", "Unknown"))


def create_s3_client(config: "NavConfig") -> Any:
    """Build a boto3 S3 client from configuration."""
    client_config = Config(
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        retries={"max_attempts": config.max_attempts, "mode": "standard"},
    )
    if config.unsigned:
        client_config = client_config.merge(Config(signature_version=UNSIGNED))

    kwargs: dict[str, Any] = {"config": client_config}
    if config.endpoint_url:
        kwargs["endpoint_url"] = config.endpoint_url
    if config.region_name:
        kwargs["region_name"] = config.region_name

    if config.profile_name:
        session = boto3.Session(profile_name=config.profile_name)
        return session.client("s3", **kwargs)

    if config.aws_access_key_id and config.aws_secret_access_key:
        kwargs["aws_access_key_id"] = config.aws_access_key_id
        kwargs["aws_secret_access_key"] = config.aws_secret_access_key

    return boto3.client("s3", **kwargs)


class S3Storage(StorageClient):
    """
    Storage over a boto3 S3 client.

    Args:
        client: A boto3 S3 client (or anything with the same methods)
        page_size: Keys requested per list_objects_v2 page
    """

    def __init__(self, client: Any, page_size: int = DEFAULT_LIST_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {page_size}")
        self._client = client
        self._page_size = page_size

    @classmethod
    def from_config(cls, config: "NavConfig") -> "S3Storage":
        """Create storage with a client built from configuration."""
        return cls(create_s3_client(config), page_size=config.list_page_size)

    @property
    def client(self) -> Any:
        return self._client

    # -------------------------------------------------------------------------
    # StorageProbe
    # -------------------------------------------------------------------------

    def bucket_exists(self, bucket: str) -> bool:
        logger.debug(f"head_bucket {bucket}")
        try:
            self._client.head_bucket(Bucket=bucket)
        except ClientError as e:
            if _error_code(e) in _NOT_FOUND_CODES:
                return False
            raise
        return True

    def path_exists(self, bucket: str, key: str) -> bool:
        logger.debug(f"list_objects_v2 {bucket} prefix={key!r} (existence)")
        response = self._client.list_objects_v2(Bucket=bucket, Prefix=key, MaxKeys=1)
        return response.get("KeyCount", len(response.get("Contents", []))) > 0

    # -------------------------------------------------------------------------
    # Listings
    # -------------------------------------------------------------------------

    def list_buckets(self) -> list[str]:
        logger.debug("list_buckets")
        response = self._client.list_buckets()
        return sorted(b["Name"] for b in response.get("Buckets", []))

    def list_entries(self, bucket: str, prefix: str = "") -> list[ListingEntry]:
        logger.debug(f"list_objects_v2 {bucket} prefix={prefix!r}")
        paginator = self._client.get_paginator("list_objects_v2")
        pages = paginator.paginate(
            Bucket=bucket,
            Prefix=prefix,
            Delimiter=PATH_DELIMITER,
            PaginationConfig={"PageSize": self._page_size},
        )

        prefixes: list[ListingEntry] = []
        objects: list[ListingEntry] = []
        for page in pages:
            for cp in page.get("CommonPrefixes", []):
                name = cp["Prefix"][len(prefix):]
                if name:
                    prefixes.append(ListingEntry(name=name, is_prefix=True))
            for obj in page.get("Contents", []):
                # A zero-byte "folder marker" equal to the prefix is not a child
                if obj["Key"] == prefix:
                    continue
                objects.append(ListingEntry(
                    name=obj["Key"][len(prefix):],
                    size=obj.get("Size"),
                    last_modified=obj.get("LastModified"),
                ))

        prefixes.sort(key=lambda e: e.name)
        objects.sort(key=lambda e: e.name)
        return [*prefixes, *objects]
