"""
Application Settings

Builds the application configuration once at process start from environment
variables. Services receive the resulting ``AppConfig`` explicitly; nothing
below the app factory reads the environment.
"""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from tempshare.domain.errors import ConfigurationError

_FILE_SIZE = re.compile(r"^(\d+)(KB|MB|GB)?$", re.IGNORECASE)
_DURATION = re.compile(r"^(\d+)([dhms])?$", re.IGNORECASE)

_SIZE_UNITS = {
    None: 1,
    "KB": 1024,
    "MB": 1024 * 1024,
    "GB": 1024 * 1024 * 1024,
}

_DURATION_UNITS = {
    None: 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

STORAGE_BACKENDS = ("local", "gcs")


def parse_file_size(size: str) -> int:
    """
    Parse a size string such as ``50MB`` into bytes.

    Units are 1024-based and case-insensitive; a bare integer is bytes.

    Raises:
        ConfigurationError: If the value is not a recognised size
    """
    match = _FILE_SIZE.match(size.strip())
    if not match:
        raise ConfigurationError(f"Invalid file size: {size!r}")
    unit = match.group(2).upper() if match.group(2) else None
    return int(match.group(1)) * _SIZE_UNITS[unit]


def parse_expire_time(expire: str) -> int:
    """
    Parse a duration string such as ``7d`` into milliseconds.

    Supported units are ``s``, ``m``, ``h`` and ``d``; a bare integer is
    milliseconds.

    Raises:
        ConfigurationError: If the value is not a recognised duration
    """
    match = _DURATION.match(expire.strip())
    if not match:
        raise ConfigurationError(f"Invalid expiration time: {expire!r}")
    unit = match.group(2).lower() if match.group(2) else None
    return int(match.group(1)) * _DURATION_UNITS[unit]


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    max_file_size: int = 50 * 1024 * 1024
    expire_in_ms: int = 7 * 24 * 60 * 60 * 1000

    storage_backend: str = "local"
    bucket_name: str = "temp-files"
    local_storage_dir: str = "/tmp/tempshare"
    gcs_credentials_path: Optional[str] = None
    gcs_project: Optional[str] = None
    gcs_endpoint: Optional[str] = None

    base_url: str = "http://localhost:8000"
    cdn_url: str = ""

    sweep_page_size: int = 1000
    sweep_interval_seconds: int = 3600

    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_file_size <= 0:
            raise ConfigurationError("MAX_FILE_SIZE must be positive")
        if self.expire_in_ms <= 0:
            raise ConfigurationError("EXPIRE_IN must be positive")
        if self.sweep_page_size <= 0:
            raise ConfigurationError("SWEEP_PAGE_SIZE must be positive")
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"STORAGE_BACKEND must be one of {STORAGE_BACKENDS}, "
                f"got {self.storage_backend!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Populated AppConfig

        Raises:
            ConfigurationError: If any value cannot be parsed
        """
        env = os.environ if environ is None else environ

        return cls(
            max_file_size=parse_file_size(env.get("MAX_FILE_SIZE", "50MB")),
            expire_in_ms=parse_expire_time(env.get("EXPIRE_IN", "7d")),
            storage_backend=env.get("STORAGE_BACKEND", "local").strip().lower(),
            bucket_name=env.get("BUCKET_NAME", "temp-files"),
            local_storage_dir=env.get("LOCAL_STORAGE_DIR", "/tmp/tempshare"),
            gcs_credentials_path=env.get("GOOGLE_APPLICATION_CREDENTIALS") or None,
            gcs_project=env.get("GCS_PROJECT") or None,
            gcs_endpoint=env.get("GCS_ENDPOINT") or None,
            base_url=env.get("BASE_URL", "http://localhost:8000").rstrip("/"),
            cdn_url=env.get("CDN_URL", "").rstrip("/"),
            sweep_page_size=_parse_int("SWEEP_PAGE_SIZE", env.get("SWEEP_PAGE_SIZE", "1000")),
            sweep_interval_seconds=_parse_int(
                "SWEEP_INTERVAL_SECONDS", env.get("SWEEP_INTERVAL_SECONDS", "3600")
            ),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
