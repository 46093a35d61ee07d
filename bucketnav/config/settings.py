"""
NavConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> config = NavConfig()

    >>> # Explicit configuration
    >>> config = NavConfig(
    ...     endpoint_url="http://localhost:9000",
    ...     region_name="us-east-1",
    ... )

    >>> # From config file
    >>> config = NavConfig.from_file("./bucketnav.toml")

Environment Variables:
    BUCKETNAV_ENDPOINT_URL - S3-compatible endpoint (MinIO, Ceph, ...)
    BUCKETNAV_REGION - Region passed to the S3 client
    BUCKETNAV_PROFILE - Named profile from the shared AWS config
    BUCKETNAV_LOG_LEVEL - Logging level for the CLI
    BUCKETNAV_CONFIG_FILE - Config file used by NavConfig.load()
    AWS_ACCESS_KEY_ID - Access key (standard name)
    AWS_SECRET_ACCESS_KEY - Secret key (standard name)
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, cast

from bucketnav.config.defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_CONFIG_PATH,
    DEFAULT_LIST_PAGE_SIZE,
    DEFAULT_PROMPT,
    DEFAULT_SPINNER_TEXT,
)


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return cast(dict[str, Any], tomllib.load(f))


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class NavConfig:
    """Configuration for bucketnav."""

    # === S3 Connection ===

    endpoint_url: str | None = None
    """Custom endpoint for S3-compatible services (None = AWS)"""

    region_name: str | None = None
    """Region for the S3 client (None = boto3 default chain)"""

    profile_name: str | None = None
    """Named profile from ~/.aws/config"""

    unsigned: bool = False
    """Send unsigned requests (public buckets only)"""

    # === Credentials ===

    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    # === Client Behaviour ===

    connect_timeout: float = 10.0
    """Seconds to wait for a connection to the storage service"""

    read_timeout: float = 30.0
    """Seconds to wait for a response from the storage service"""

    max_attempts: int = 3
    """Total attempts per request (retries are the client's job, not the shell's)"""

    list_page_size: int = DEFAULT_LIST_PAGE_SIZE
    """Keys requested per list_objects_v2 page"""

    # === Shell ===

    prompt: str = DEFAULT_PROMPT
    """Prompt template; {path} is replaced with the current location"""

    spinner_text: str = DEFAULT_SPINNER_TEXT
    """Text shown next to the spinner for long-running commands"""

    # === Logging ===

    log_level: str = "WARNING"
    """Logging level used by the CLI"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if hasattr(self, key) and not callable(getattr(self, key)):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        # Credentials (standard names)
        self.aws_access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
        self.aws_secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")

        # BUCKETNAV_* prefixed settings
        if endpoint := os.getenv("BUCKETNAV_ENDPOINT_URL"):
            self.endpoint_url = endpoint
        if region := os.getenv("BUCKETNAV_REGION"):
            self.region_name = region
        if profile := os.getenv("BUCKETNAV_PROFILE"):
            self.profile_name = profile
        if level := os.getenv("BUCKETNAV_LOG_LEVEL"):
            self.log_level = level.upper()

    @classmethod
    def from_file(cls, path: str | Path) -> "NavConfig":
        """
        Load configuration from TOML file.

        Nested sections are flattened into config keys.

        Example TOML:
            [s3]
            endpoint_url = "http://localhost:9000"
            region = "us-east-1"
            max_attempts = 5

            [shell]
            prompt = "s3:{path}$ "

            [logging]
            level = "INFO"

        Args:
            path: Path to TOML configuration file

        Returns:
            NavConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file names an unknown option
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        flat_config: dict[str, Any] = {}

        # Keys whose name in the file differs from the attribute name
        renames = {
            ("s3", "region"): "region_name",
            ("s3", "profile"): "profile_name",
            ("logging", "level"): "log_level",
        }

        for section in ("s3", "shell", "logging"):
            for key, value in data.get(section, {}).items():
                flat_config[renames.get((section, key), key)] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "NavConfig":
        """Load configuration from environment variables only."""
        return cls()

    @classmethod
    def load(cls, path: str | Path | None = None) -> "NavConfig":
        """
        Load configuration from the first file found, else from the environment.

        Lookup order: explicit path, BUCKETNAV_CONFIG_FILE, ~/.bucketnav/config.toml.
        An explicit path that doesn't exist is an error; the implicit ones are optional.
        """
        if path is not None:
            return cls.from_file(path)

        env_path = os.getenv(CONFIG_FILE_ENV)
        if env_path:
            return cls.from_file(env_path)

        default_path = Path(DEFAULT_CONFIG_PATH).expanduser()
        if default_path.exists():
            return cls.from_file(default_path)

        return cls.from_env()

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Credentials are never written; set them via environment variables.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)

        sections: dict[str, dict[str, str | int | float | bool | None]] = {
            "s3": {
                "endpoint_url": self.endpoint_url,
                "region": self.region_name,
                "profile": self.profile_name,
                "unsigned": self.unsigned,
                "connect_timeout": self.connect_timeout,
                "read_timeout": self.read_timeout,
                "max_attempts": self.max_attempts,
                "list_page_size": self.list_page_size,
            },
            "shell": {
                "prompt": self.prompt,
                "spinner_text": self.spinner_text,
            },
            "logging": {
                "level": self.log_level,
            },
        }

        lines = ["# bucketnav configuration", ""]

        for section_name, section_values in sections.items():
            lines.append(f"[{section_name}]")
            for key, value in section_values.items():
                # TOML has no null; unset options are simply omitted
                if isinstance(value, str):
                    lines.append(f"{key} = {_toml_string(value)}")
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
            lines.append("")

        lines.extend([
            "# Credentials should be set via environment variables:",
            "# AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY (or a named profile)",
            "",
        ])

        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "NavConfig":
        """Return new config with specified overrides (None values are ignored)."""
        new_config = NavConfig.__new__(NavConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if value is None:
                continue
            if not hasattr(new_config, key):
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(new_config, key, value)
        return new_config
