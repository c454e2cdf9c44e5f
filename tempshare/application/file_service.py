"""
File Application Service

Serves stored objects back to clients and removes them on request.
"""

import logging

from tempshare.domain.errors import ErrorCategory, NotFoundError, StorageError
from tempshare.domain.file_storage.content_types import guess_content_type
from tempshare.domain.file_storage.entities import FileContent
from tempshare.domain.file_storage.storage_repository import IObjectStore
from tempshare.domain.file_storage.value_objects import validate_request_key

logger = logging.getLogger(__name__)


class FileService:
    """
    Application service for retrieval and deletion of stored objects.
    """

    def __init__(self, object_store: IObjectStore):
        """
        Initialize FileService.

        Args:
            object_store: Store holding the uploaded objects
        """
        self.object_store = object_store

    def get_file(self, key: str) -> FileContent:
        """
        Fetch an object and the content type it should be served with.

        Args:
            key: Object key, already URL-decoded

        Returns:
            FileContent with bytes and inferred content type

        Raises:
            InvalidKeyError: If the key is blank or malformed
            NotFoundError: If the object is absent or the store read fails
        """
        key = validate_request_key(key)

        try:
            data = self.object_store.download(key)
        except StorageError as e:
            logger.error(f"Error reading {key}: {e}", exc_info=True)
            raise NotFoundError(f"File not readable: {key}", original_error=e) from e

        if data is None:
            raise NotFoundError(f"File not found: {key}")

        return FileContent(key=key, data=data, content_type=guess_content_type(key))

    def exists(self, key: str) -> bool:
        """
        Check whether an object exists using a listing narrowed to the key.

        Raises:
            StorageError: If the listing fails
        """
        entries = self.object_store.list(prefix=key)
        return any(entry.key == key for entry in entries)

    def delete_file(self, key: str) -> str:
        """
        Delete a single object.

        Args:
            key: Object key, already URL-decoded

        Returns:
            The deleted key

        Raises:
            InvalidKeyError: If the key is blank or malformed
            NotFoundError: If no object exists under the key
            StorageError: If the existence check or the removal fails
        """
        key = validate_request_key(key)
        logger.info(f"Deleting file: {key}")

        try:
            found = self.exists(key)
        except StorageError as e:
            logger.error(f"Error checking existence of {key}: {e}", exc_info=True)
            raise StorageError(
                f"Failed to check existence of {key}",
                original_error=e.original_error or e,
                category=ErrorCategory.STORAGE_DELETE_FAILED,
            ) from e

        if not found:
            raise NotFoundError(f"File not found: {key}")

        result = self.object_store.remove([key])
        if not result.succeeded:
            cause = result.failed.get(key, "unknown error")
            logger.error(f"Delete of {key} failed: {cause}")
            raise StorageError(
                f"Failed to delete {key}: {cause}",
                category=ErrorCategory.STORAGE_DELETE_FAILED,
            )

        return key
