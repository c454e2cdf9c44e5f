"""
Upload Application Service

Validates incoming files, assigns their expiring object key and stores them.
"""

import logging
from typing import BinaryIO, Callable, Optional
from urllib.parse import quote

from tempshare.config.settings import AppConfig
from tempshare.domain.errors import ErrorCategory, StorageError, ValidationError
from tempshare.domain.file_storage.content_types import lookup_content_type
from tempshare.domain.file_storage.entities import UploadDescriptor
from tempshare.domain.file_storage.storage_repository import IObjectStore
from tempshare.domain.file_storage.value_objects import current_millis, encode_key

logger = logging.getLogger(__name__)

PREVIEW_PATH = "/api/file"


class UploadService:
    """
    Application service for the upload use case.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(
        self,
        object_store: IObjectStore,
        config: AppConfig,
        clock: Callable[[], int] = current_millis,
    ):
        """
        Initialize UploadService.

        Args:
            object_store: Store that receives uploaded bytes
            config: Application configuration (size ceiling, TTL, URLs)
            clock: Returns the current time in epoch milliseconds
        """
        self.object_store = object_store
        self.config = config
        self.clock = clock

    def upload(
        self,
        filename: Optional[str],
        stream: Optional[BinaryIO],
        content_type: Optional[str] = None,
        declared_size: Optional[int] = None,
    ) -> UploadDescriptor:
        """
        Store an uploaded file under a key that encodes its expiry.

        At most ``max_file_size + 1`` bytes are read from the stream, which is
        enough to tell an oversize payload apart without buffering all of it.

        Args:
            filename: Original filename from the client
            stream: Readable binary stream with the file content
            content_type: MIME type declared by the client
            declared_size: Size declared by the client, if any

        Returns:
            UploadDescriptor for the stored object

        Raises:
            ValidationError: If no file was attached or it is too large
            StorageError: If the object store rejects the write
        """
        if stream is None or not filename:
            raise ValidationError(
                "No file provided", category=ErrorCategory.PAYLOAD_MISSING
            )

        max_size = self.config.max_file_size
        if declared_size is not None and declared_size > max_size:
            raise self._too_large(filename, declared_size)

        content = stream.read(max_size + 1)
        if len(content) > max_size:
            raise self._too_large(filename, len(content))

        uploaded_at = self.clock()
        expire_at = uploaded_at + self.config.expire_in_ms
        key = encode_key(uploaded_at, expire_at, filename)
        resolved_type = content_type or lookup_content_type(filename) or ""

        try:
            self.object_store.upload(key, content, resolved_type or None)
        except StorageError as e:
            logger.error(f"Upload of {key} failed: {e}", exc_info=True)
            raise StorageError(
                f"Failed to store {key}",
                original_error=e.original_error or e,
                category=ErrorCategory.STORAGE_WRITE_FAILED,
            ) from e

        logger.info(f"Stored {key} ({len(content)} bytes), expires at {expire_at}")

        return UploadDescriptor(
            key=key,
            name=filename,
            size=len(content),
            content_type=resolved_type,
            url=self._public_url(key),
            preview_url=f"{self.config.base_url}{PREVIEW_PATH}/{quote(key)}",
            uploaded_at=uploaded_at,
            expire_at=expire_at,
        )

    def _public_url(self, key: str) -> str:
        if self.config.cdn_url:
            return f"{self.config.cdn_url}/{quote(key)}"
        return self.object_store.public_url(key)

    def _too_large(self, filename: str, size: int) -> ValidationError:
        logger.info(
            f"Rejected {filename}: {size} bytes exceeds limit of "
            f"{self.config.max_file_size}"
        )
        return ValidationError(
            f"File size {size} exceeds limit {self.config.max_file_size}",
            category=ErrorCategory.PAYLOAD_TOO_LARGE,
        )
