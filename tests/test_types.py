"""Tests for location types."""

import pytest
from pydantic import ValidationError

from bucketnav.types import ListingEntry, Location, ResolvedTarget, TargetKind


class TestLocation:
    """Tests for Location."""

    def test_root_defaults(self):
        """Location() is the root."""
        location = Location()
        assert location == Location.root()
        assert location.kind is TargetKind.ROOT
        assert location.segments == []
        assert location.path == "/"

    def test_bucket_level(self):
        location = Location(bucket="bucket")
        assert location.kind is TargetKind.BUCKET
        assert location.segments == ["bucket"]
        assert str(location) == "/bucket/"

    def test_prefix_level(self):
        location = Location(bucket="bucket", prefix="a/b/")
        assert location.kind is TargetKind.PREFIX
        assert location.segments == ["bucket", "a", "b"]

    def test_prefix_requires_delimiter(self):
        """Prefix must end with the delimiter."""
        with pytest.raises(ValidationError):
            Location(bucket="bucket", prefix="a")

    def test_prefix_requires_bucket(self):
        """No prefix without a bucket."""
        with pytest.raises(ValidationError):
            Location(prefix="a/")

    def test_bucket_rejects_delimiter(self):
        with pytest.raises(ValidationError):
            Location(bucket="a/b")

    def test_frozen(self):
        """Locations are replaced, never edited."""
        location = Location(bucket="bucket")
        with pytest.raises(ValidationError):
            location.bucket = "other"

    def test_from_segments(self):
        assert Location.from_segments([]) == Location.root()
        assert Location.from_segments(["b"]) == Location(bucket="b")
        assert Location.from_segments(["b", "x", "y"]) == Location(bucket="b", prefix="x/y/")


class TestResolvedTarget:
    """Tests for ResolvedTarget."""

    def test_requires_probe(self):
        root = ResolvedTarget(location=Location(), kind=TargetKind.ROOT)
        bucket = ResolvedTarget(location=Location(bucket="b"), kind=TargetKind.BUCKET)
        assert root.requires_probe is False
        assert bucket.requires_probe is True


class TestListingEntry:
    """Tests for ListingEntry."""

    def test_defaults(self):
        entry = ListingEntry(name="file.txt")
        assert entry.is_prefix is False
        assert entry.size is None
        assert entry.last_modified is None
