"""
File Storage Domain

Handles object naming, expiration metadata and the object store contract.
"""

from .content_types import guess_content_type
from .entities import FileContent, RemoveResult, StoredObject, UploadDescriptor
from .storage_repository import IObjectStore
from .value_objects import (
    ExpirationStamp,
    decode_key,
    encode_key,
    sanitize_name,
    try_decode_key,
)

__all__ = [
    "ExpirationStamp",
    "FileContent",
    "IObjectStore",
    "RemoveResult",
    "StoredObject",
    "UploadDescriptor",
    "decode_key",
    "encode_key",
    "guess_content_type",
    "sanitize_name",
    "try_decode_key",
]
