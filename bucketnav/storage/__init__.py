"""
Storage Backends

Capabilities the shell needs from an object store, and implementations.

Modules:
    base: StorageProbe (existence checks) and StorageClient (adds listings)
    memory: Dict-backed storage for offline use and tests
    s3/: boto3 implementation for AWS S3 and compatible services

Design Principles:
    - Commands receive storage by injection, never construct it
    - Backend errors propagate unchanged; "not found" is a False answer
"""

from bucketnav.storage.base import StorageClient, StorageProbe
from bucketnav.storage.memory import InMemoryStorage

__all__ = [
    "InMemoryStorage",
    "StorageClient",
    "StorageProbe",
]
