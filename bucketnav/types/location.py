"""
Location Types

Positions in the virtual namespace. The storage service has no directories,
so a "directory" is a bucket plus a delimiter-terminated key prefix.

Models:
    - TargetKind: Classification of a location (root, bucket, prefix)
    - Location: Absolute position (bucket, prefix); immutable
    - ResolvedTarget: Output of path resolution, consumed by commands
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bucketnav.config.defaults import PATH_DELIMITER


class TargetKind(str, Enum):
    """Level of the namespace a location points at."""

    ROOT = "root"
    BUCKET = "bucket"
    PREFIX = "prefix"


class Location(BaseModel):
    """
    An absolute position in the virtual namespace.

    Attributes:
        bucket: Selected bucket ("" means namespace root)
        prefix: Key prefix inside the bucket ("" means bucket root);
            always ends with the path delimiter when non-empty

    Locations are frozen: navigation replaces the whole value, it never
    edits one in place.
    """

    model_config = ConfigDict(frozen=True)

    bucket: str = ""
    prefix: str = ""

    @model_validator(mode="after")
    def _check_invariants(self) -> "Location":
        if PATH_DELIMITER in self.bucket:
            raise ValueError(f"Bucket name cannot contain {PATH_DELIMITER!r}: {self.bucket!r}")
        if self.prefix and not self.bucket:
            raise ValueError("A prefix requires a bucket")
        if self.prefix and not self.prefix.endswith(PATH_DELIMITER):
            raise ValueError(f"Prefix must end with {PATH_DELIMITER!r}: {self.prefix!r}")
        return self

    @classmethod
    def root(cls) -> "Location":
        """The namespace root (no bucket selected)."""
        return cls()

    @classmethod
    def from_segments(cls, segments: list[str]) -> "Location":
        """Build a location from [bucket, *prefix_parts]."""
        if not segments:
            return cls()
        bucket, *parts = segments
        prefix = PATH_DELIMITER.join(parts) + PATH_DELIMITER if parts else ""
        return cls(bucket=bucket, prefix=prefix)

    @property
    def kind(self) -> TargetKind:
        if not self.bucket:
            return TargetKind.ROOT
        if not self.prefix:
            return TargetKind.BUCKET
        return TargetKind.PREFIX

    @property
    def segments(self) -> list[str]:
        """[bucket, *prefix_parts], empty at the root."""
        if not self.bucket:
            return []
        return [self.bucket, *[p for p in self.prefix.split(PATH_DELIMITER) if p]]

    @property
    def path(self) -> str:
        """Display form: "/", "/bucket/", "/bucket/a/b/"."""
        if not self.bucket:
            return PATH_DELIMITER
        return f"{PATH_DELIMITER}{self.bucket}{PATH_DELIMITER}{self.prefix}"

    def __str__(self) -> str:
        return self.path


class ResolvedTarget(BaseModel):
    """
    Result of resolving a user path against the current location.

    Transient: built by the path resolver, read by a command, then dropped.
    """

    model_config = ConfigDict(frozen=True)

    location: Location
    kind: TargetKind = Field(..., description="Classification of the location")

    @property
    def requires_probe(self) -> bool:
        """Whether reaching this target needs an existence check over the network."""
        return self.kind is not TargetKind.ROOT
