"""Shared fixtures and test doubles."""

from __future__ import annotations

import pytest

from bucketnav.shell.context import Context
from bucketnav.shell.output import BufferOutputter
from bucketnav.storage.base import StorageClient
from bucketnav.storage.memory import InMemoryStorage
from bucketnav.types import ListingEntry


class RecordingStorage(StorageClient):
    """
    Storage double with canned answers that records every call.

    Answers are either a bool or an exception instance to raise.
    """

    def __init__(
        self,
        bucket_answer: bool | BaseException = True,
        path_answer: bool | BaseException = True,
        entries: list[ListingEntry] | None = None,
        buckets: list[str] | None = None,
    ) -> None:
        self.bucket_answer = bucket_answer
        self.path_answer = path_answer
        self.entries = entries or []
        self.buckets = buckets or []
        self.calls: list[tuple] = []

    def _answer(self, answer: bool | BaseException) -> bool:
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def bucket_exists(self, bucket: str) -> bool:
        self.calls.append(("bucket_exists", bucket))
        return self._answer(self.bucket_answer)

    def path_exists(self, bucket: str, key: str) -> bool:
        self.calls.append(("path_exists", bucket, key))
        return self._answer(self.path_answer)

    def list_buckets(self) -> list[str]:
        self.calls.append(("list_buckets",))
        return list(self.buckets)

    def list_entries(self, bucket: str, prefix: str = "") -> list[ListingEntry]:
        self.calls.append(("list_entries", bucket, prefix))
        return list(self.entries)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    """Keep the developer's shell environment out of configuration."""
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "BUCKETNAV_ENDPOINT_URL",
        "BUCKETNAV_REGION",
        "BUCKETNAV_PROFILE",
        "BUCKETNAV_LOG_LEVEL",
        "BUCKETNAV_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    # ~/.bucketnav/config.toml must not leak into tests
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def context() -> Context:
    return Context()


@pytest.fixture
def out() -> BufferOutputter:
    return BufferOutputter()


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage({
        "photos": ["2024/beach.jpg", "2024/summer/pool.jpg", "readme.txt"],
        "backups": ["db/2024-01-01.sql"],
        "empty": [],
    })


@pytest.fixture
def make_storage():
    """Factory for RecordingStorage doubles."""
    return RecordingStorage
