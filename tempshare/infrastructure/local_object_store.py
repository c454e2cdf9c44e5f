"""
Local Filesystem Object Store

Concrete implementation of IObjectStore backed by a directory on the local
filesystem. Used for development and integration tests; production runs
against Google Cloud Storage.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional
from urllib.parse import quote

from tempshare.domain.errors import ErrorCategory, StorageError
from tempshare.domain.file_storage.entities import RemoveResult, StoredObject
from tempshare.domain.file_storage.storage_repository import (
    DEFAULT_LIST_LIMIT,
    IObjectStore,
)

logger = logging.getLogger(__name__)


class LocalObjectStore(IObjectStore):
    """
    Local filesystem implementation of IObjectStore.

    Keys map to paths relative to ``base_path``; keys that would resolve
    outside it are rejected.

    Attributes:
        base_path: Base directory path for stored objects
        public_base_url: URL prefix used to build public links
    """

    def __init__(self, base_path: str = "/tmp/tempshare", public_base_url: str = ""):
        """
        Initialize the local object store.

        Args:
            base_path: Base directory for stored objects
            public_base_url: Base URL of this service, used for public links

        Raises:
            StorageError: If the base directory cannot be created
        """
        self.base_path = Path(base_path).resolve()
        self.public_base_url = public_base_url.rstrip("/")
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to create storage directory: {self.base_path}",
                original_error=e,
            ) from e

    def _resolve(self, key: str) -> Path:
        path = (self.base_path / key).resolve()
        if path != self.base_path and self.base_path not in path.parents:
            raise StorageError(f"Key escapes storage directory: {key!r}")
        return path

    def list(self, prefix: str = "", limit: int = DEFAULT_LIST_LIMIT) -> List[StoredObject]:
        try:
            keys = sorted(
                path.relative_to(self.base_path).as_posix()
                for path in self.base_path.rglob("*")
                if path.is_file()
            )
            entries = []
            for key in keys:
                if not key.startswith(prefix):
                    continue
                try:
                    stat = (self.base_path / key).stat()
                except FileNotFoundError:
                    # Removed by a concurrent delete or sweep
                    continue
                entries.append(
                    StoredObject(
                        key=key,
                        size=stat.st_size,
                        created_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                    )
                )
                if len(entries) >= limit:
                    break
            return entries
        except OSError as e:
            raise StorageError(
                f"Failed to list {self.base_path}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_LIST_FAILED,
            ) from e

    def upload(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        path = self._resolve(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise StorageError(
                f"Failed to write {key}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_WRITE_FAILED,
            ) from e

    def download(self, key: str) -> Optional[bytes]:
        path = self._resolve(key)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError):
            return None
        except OSError as e:
            raise StorageError(
                f"Failed to read {key}: {e}",
                original_error=e,
                category=ErrorCategory.STORAGE_READ_FAILED,
            ) from e

    def remove(self, keys: Iterable[str]) -> RemoveResult:
        result = RemoveResult()
        for key in keys:
            try:
                self._resolve(key).unlink(missing_ok=True)
            except (OSError, StorageError) as e:
                logger.warning("Failed to remove %s: %s", key, e)
                result.failed[key] = str(e)
                continue
            result.removed.append(key)
        return result

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/file/{quote(key)}"
