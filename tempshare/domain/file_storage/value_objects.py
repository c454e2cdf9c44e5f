"""
File Storage Value Objects

Object keys carry their own expiration metadata, so the store's key listing
is the only index the service needs:

    <uploadedAtMillis>-<expireAtMillis>-<sanitizedOriginalName>

Sanitized names keep ``-``, so a key may split into more than three
segments. Index 1 is always the expiry; everything from index 2 onward is
the name.
"""

import re
import time
from dataclasses import dataclass
from typing import Optional

from tempshare.domain.errors import InvalidKeyError, MalformedKeyError

KEY_SEPARATOR = "-"

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9.\-]")
_TIMESTAMP = re.compile(r"[0-9]+")


def current_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def sanitize_name(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9.-]`` with ``_``."""
    return _UNSAFE_NAME_CHARS.sub("_", name)


@dataclass(frozen=True)
class ExpirationStamp:
    """
    Timestamps decoded from an object key.

    ``uploaded_at`` is None when the first segment is not numeric; the
    expiry is the only field the sweep depends on.
    """

    expire_at: int
    uploaded_at: Optional[int] = None
    name: str = ""

    def is_expired(self, now_ms: int) -> bool:
        return self.expire_at < now_ms


def encode_key(uploaded_at: int, expire_at: int, original_name: str) -> str:
    """
    Build the object key for an upload.

    Args:
        uploaded_at: Upload time in epoch milliseconds
        expire_at: Expiry time in epoch milliseconds
        original_name: Filename as supplied by the client

    Returns:
        Key string in ``uploaded-expire-name`` form

    Raises:
        ValueError: If expire_at is not after uploaded_at
    """
    if expire_at <= uploaded_at:
        raise ValueError(
            f"expire_at ({expire_at}) must be greater than uploaded_at ({uploaded_at})"
        )
    return KEY_SEPARATOR.join(
        (str(int(uploaded_at)), str(int(expire_at)), sanitize_name(original_name))
    )


def decode_key(key: str) -> ExpirationStamp:
    """
    Decode the timestamps embedded in an object key.

    Raises:
        MalformedKeyError: If the key has fewer than three segments or the
            expiry segment is not an integer
    """
    parts = key.split(KEY_SEPARATOR)
    if len(parts) < 3:
        raise MalformedKeyError(f"Key has fewer than 3 segments: {key!r}")

    if not _TIMESTAMP.fullmatch(parts[1]):
        raise MalformedKeyError(f"Expiry segment is not numeric: {key!r}")

    uploaded_at = int(parts[0]) if _TIMESTAMP.fullmatch(parts[0]) else None
    return ExpirationStamp(
        expire_at=int(parts[1]),
        uploaded_at=uploaded_at,
        name=KEY_SEPARATOR.join(parts[2:]),
    )


def try_decode_key(key: str) -> Optional[ExpirationStamp]:
    """Decode a key, returning None instead of raising for malformed keys."""
    try:
        return decode_key(key)
    except MalformedKeyError:
        return None


def validate_request_key(key: Optional[str]) -> str:
    """
    Check that a key taken from a request path can address a stored object.

    Keys produced by :func:`encode_key` never contain ``/``; nested paths
    are accepted for objects placed by other tools, but traversal segments
    and backslashes are not.

    Returns:
        The key stripped of surrounding whitespace

    Raises:
        InvalidKeyError: If the key is blank or contains traversal segments
    """
    if key is None or not key.strip():
        raise InvalidKeyError("File path not provided")

    key = key.strip()
    if "\\" in key or key.startswith("/") or ".." in key.split("/"):
        raise InvalidKeyError(f"Invalid file path: {key!r}")
    return key

