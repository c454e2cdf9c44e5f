"""
Google Cloud Storage Object Store

Concrete implementation of IObjectStore for Google Cloud Storage.
This implementation uses the google-cloud-storage library to perform object
operations on a single bucket, keeping infrastructure concerns out of the
application services.
"""

import logging
from typing import Iterable, List, Optional

from google.cloud import storage
from google.cloud.exceptions import GoogleCloudError, NotFound

from tempshare.domain.errors import ErrorCategory, StorageError
from tempshare.domain.file_storage.content_types import DEFAULT_CONTENT_TYPE
from tempshare.domain.file_storage.entities import RemoveResult, StoredObject
from tempshare.domain.file_storage.storage_repository import (
    DEFAULT_LIST_LIMIT,
    IObjectStore,
)

logger = logging.getLogger(__name__)


class GCSObjectStore(IObjectStore):
    """
    Google Cloud Storage implementation of IObjectStore.

    Thread Safety:
        This implementation is thread-safe. The GCS client handles concurrent
        operations safely.

    Attributes:
        bucket_name: Name of the GCS bucket holding uploads
        client: Google Cloud Storage client instance
        bucket: GCS bucket object
    """

    def __init__(self, client: storage.Client, bucket_name: str):
        """
        Initialize the GCS object store.

        Args:
            client: Configured storage client
            bucket_name: Name of the GCS bucket to use for storage

        Raises:
            ValueError: If bucket_name is empty
        """
        if not bucket_name or not bucket_name.strip():
            raise ValueError("bucket_name cannot be empty")

        self.bucket_name = bucket_name
        self.client = client
        self.bucket = client.bucket(bucket_name)

    def list(self, prefix: str = "", limit: int = DEFAULT_LIST_LIMIT) -> List[StoredObject]:
        try:
            blobs = self.client.list_blobs(
                self.bucket_name, prefix=prefix or None, max_results=limit
            )
            return [
                StoredObject(
                    key=blob.name,
                    size=blob.size,
                    content_type=blob.content_type,
                    created_at=blob.time_created,
                )
                for blob in blobs
            ]
        except GoogleCloudError as e:
            raise StorageError(
                f"Failed to list objects in GCS bucket {self.bucket_name}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_LIST_FAILED,
            ) from e
        except Exception as e:
            raise StorageError(
                f"Failed to list objects: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_LIST_FAILED,
            ) from e

    def upload(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        try:
            blob = self.bucket.blob(key)
            blob.upload_from_string(content, content_type=content_type or DEFAULT_CONTENT_TYPE)
        except GoogleCloudError as e:
            raise StorageError(
                f"Failed to upload {key} to GCS: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_WRITE_FAILED,
            ) from e
        except Exception as e:
            raise StorageError(
                f"Failed to upload {key}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_WRITE_FAILED,
            ) from e

    def download(self, key: str) -> Optional[bytes]:
        try:
            return self.bucket.blob(key).download_as_bytes()
        except NotFound:
            return None
        except GoogleCloudError as e:
            raise StorageError(
                f"Failed to download {key} from GCS: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_READ_FAILED,
            ) from e
        except Exception as e:
            raise StorageError(
                f"Failed to download {key}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_READ_FAILED,
            ) from e

    def remove(self, keys: Iterable[str]) -> RemoveResult:
        result = RemoveResult()
        for key in keys:
            try:
                self.bucket.delete_blob(key)
            except NotFound:
                # Already gone
                logger.debug("Blob %s already absent from %s", key, self.bucket_name)
            except GoogleCloudError as e:
                logger.warning("Failed to delete blob %s: %s", key, e)
                result.failed[key] = str(e)
                continue
            except Exception as e:
                logger.warning("Failed to delete blob %s: %s", key, e, exc_info=True)
                result.failed[key] = str(e)
                continue
            result.removed.append(key)
        return result

    def public_url(self, key: str) -> str:
        return self.bucket.blob(key).public_url
