"""
Static extension to MIME type table used when serving stored objects inline.
"""

from typing import Optional

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "pdf": "application/pdf",
    "txt": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
    "zip": "application/zip",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "mp4": "video/mp4",
    "webm": "video/webm",
}


def lookup_content_type(key: str) -> Optional[str]:
    """Return the MIME type for the key's extension, or None if unknown."""
    if "." not in key:
        return None
    extension = key.rsplit(".", 1)[-1].lower()
    return CONTENT_TYPES.get(extension)


def guess_content_type(key: str) -> str:
    """Return the MIME type for the key's extension, falling back to binary."""
    return lookup_content_type(key) or DEFAULT_CONTENT_TYPE


def is_image(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.startswith("image/")


def is_video(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.startswith("video/")
