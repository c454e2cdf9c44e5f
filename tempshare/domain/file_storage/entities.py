"""
File Storage Entities

Domain entities describing stored objects and the results of store operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .content_types import is_image, is_video


@dataclass(frozen=True)
class StoredObject:
    """
    Entry returned by an object store listing.

    Only ``key`` is guaranteed; the remaining attributes are filled in when
    the backing store reports them.
    """
    key: str
    size: Optional[int] = None
    content_type: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class RemoveResult:
    """
    Outcome of a batch remove.

    Keys that were already absent count as removed.
    """
    removed: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return not self.failed


@dataclass(frozen=True)
class FileContent:
    """Bytes fetched from the store together with the inferred content type."""
    key: str
    data: bytes
    content_type: str


@dataclass(frozen=True)
class UploadDescriptor:
    """
    Entity describing a freshly stored upload.

    Serialized with the camelCase field names the upload client expects.
    """
    key: str
    name: str
    size: int
    content_type: str
    url: str
    preview_url: str
    uploaded_at: int
    expire_at: int

    @property
    def is_image(self) -> bool:
        return is_image(self.content_type)

    @property
    def is_video(self) -> bool:
        return is_video(self.content_type)

    @property
    def is_media(self) -> bool:
        return self.is_image or self.is_video

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert descriptor to dictionary for API response.

        Returns:
            Dictionary keyed the way the upload client reads it
        """
        return {
            "id": self.key,
            "name": self.name,
            "size": self.size,
            "type": self.content_type,
            "url": self.url,
            "previewUrl": self.preview_url,
            "fileName": self.key,
            "isMedia": self.is_media,
            "isImage": self.is_image,
            "isVideo": self.is_video,
            "uploadedAt": _iso_from_millis(self.uploaded_at),
            "expiresAt": _iso_from_millis(self.expire_at),
        }


def _iso_from_millis(millis: int) -> str:
    moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
