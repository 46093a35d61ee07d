"""
bucketnav - Filesystem-Style Navigation for Object Storage

Browse a flat bucket/key namespace with cd, ls and pwd, from an
interactive shell, from Python, or through an MCP tool.

Example:
    >>> from bucketnav import NavShell, InMemoryStorage
    >>> shell = NavShell(InMemoryStorage({"photos": ["2024/beach.jpg"]}))
    >>> shell.cd("photos/2024")
    '/photos/2024/'
    >>> shell.ls()
    'beach.jpg'

Main Classes:
    NavShell: Programmatic navigation interface
    NavConfig: Configuration management
    S3Storage: boto3-backed storage client
    InMemoryStorage: Dict-backed storage client
"""

__version__ = "0.1.0"

# Public API - lazy imports so importing the package doesn't pull in boto3
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "NavShell":
        from bucketnav.api.shell import NavShell
        return NavShell

    if name == "NavConfig":
        from bucketnav.config.settings import NavConfig
        return NavConfig

    if name == "S3Storage":
        from bucketnav.storage.s3 import S3Storage
        return S3Storage

    if name == "InMemoryStorage":
        from bucketnav.storage.memory import InMemoryStorage
        return InMemoryStorage

    # Types
    if name in ("Location", "ResolvedTarget", "TargetKind", "ListingEntry"):
        from bucketnav import types
        return getattr(types, name)

    # Errors
    if name in ("NavigationError", "InvalidPathError", "TargetNotFoundError"):
        from bucketnav import errors
        return getattr(errors, name)

    raise AttributeError(f"module 'bucketnav' has no attribute {name!r}")


__all__ = [
    # Main classes
    "NavShell",
    "NavConfig",
    "S3Storage",
    "InMemoryStorage",

    # Types
    "Location",
    "ResolvedTarget",
    "TargetKind",
    "ListingEntry",

    # Errors
    "NavigationError",
    "InvalidPathError",
    "TargetNotFoundError",

    # Version
    "__version__",
]
