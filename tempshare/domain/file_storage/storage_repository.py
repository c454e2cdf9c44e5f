"""
Object Store Interface

Abstract interface for the object storage service that owns uploaded bytes.
The application holds only object keys; every read, write and delete goes
through this contract so services stay infrastructure-agnostic and can be
exercised against in-memory doubles.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .entities import RemoveResult, StoredObject

DEFAULT_LIST_LIMIT = 1000


class IObjectStore(ABC):
    """
    Capability interface over a flat key/bytes object store.

    Contract Guarantees:
    - remove() is idempotent: removing an absent key is a success no-op
    - download() returns None for absent keys instead of raising
    - A remove is visible to subsequent list() and download() calls

    Implementation Requirements:
    - Failures of the underlying service are raised as
      ``tempshare.domain.errors.StorageError`` with the cause attached
    - Implementations hold no per-request state and are safe to share
      between request handlers and the sweep job
    """

    @abstractmethod
    def list(self, prefix: str = "", limit: int = DEFAULT_LIST_LIMIT) -> List[StoredObject]:
        """
        List stored objects.

        Only the first page is returned; callers that need more than
        ``limit`` entries are outside this contract.

        Args:
            prefix: Only keys starting with this prefix are returned
            limit: Maximum number of entries

        Returns:
            Stored objects ordered by key

        Raises:
            StorageError: If the listing call fails
        """
        pass  # pragma: no cover

    @abstractmethod
    def upload(self, key: str, content: bytes, content_type: Optional[str] = None) -> None:
        """
        Store bytes under a key.

        Args:
            key: Object key
            content: Complete object content
            content_type: Declared MIME type, stored as object metadata

        Raises:
            StorageError: If the write fails
        """
        pass  # pragma: no cover

    @abstractmethod
    def download(self, key: str) -> Optional[bytes]:
        """
        Fetch the bytes stored under a key.

        Returns:
            Object content, or None if no object exists under the key

        Raises:
            StorageError: If the read fails for any reason other than absence
        """
        pass  # pragma: no cover

    @abstractmethod
    def remove(self, keys: Iterable[str]) -> RemoveResult:
        """
        Remove a batch of objects.

        Per-key failures are collected in the result rather than raised, so
        one bad key does not abort the batch.

        Returns:
            RemoveResult listing removed keys and failures keyed by object key
        """
        pass  # pragma: no cover

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Return a direct URL clients can use to fetch the object."""
        pass  # pragma: no cover

    def health_check(self) -> bool:
        """
        Check that the store is reachable.

        Returns:
            True if a minimal listing succeeds
        """
        try:
            self.list(limit=1)
            return True
        except Exception:
            return False
