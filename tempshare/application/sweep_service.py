"""
Expiration Sweep Service

Deletes every stored object whose key-encoded expiry has passed.

The sweep lists one page of objects, decodes each key, and removes all
expired keys in a single batch. Removing an already-removed key is a no-op,
so concurrent or repeated sweeps are harmless.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from tempshare.domain.errors import ErrorCategory, StorageError
from tempshare.domain.file_storage.storage_repository import (
    DEFAULT_LIST_LIMIT,
    IObjectStore,
)
from tempshare.domain.file_storage.value_objects import current_millis, try_decode_key

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outcome of one sweep invocation."""

    deleted: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)
    scanned: int = 0

    @property
    def count(self) -> int:
        return len(self.deleted)

    @property
    def succeeded(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deleted": list(self.deleted),
            "count": self.count,
            "failed": sorted(self.failed),
            "skipped": len(self.skipped),
            "scanned": self.scanned,
        }


class ExpirationSweepService:
    """
    Application service for the expiration sweep.

    Invoked externally (HTTP trigger or Celery beat); it never schedules
    itself.
    """

    def __init__(
        self,
        object_store: IObjectStore,
        page_size: int = DEFAULT_LIST_LIMIT,
        clock: Callable[[], int] = current_millis,
    ):
        """
        Initialize ExpirationSweepService.

        Args:
            object_store: Store to sweep
            page_size: Maximum number of objects examined per invocation
            clock: Returns the current time in epoch milliseconds
        """
        self.object_store = object_store
        self.page_size = page_size
        self.clock = clock

    def sweep(self) -> SweepResult:
        """
        Remove expired objects.

        Returns:
            SweepResult with deleted keys and any per-key failures

        Raises:
            StorageError: If listing fails; nothing is deleted in that case
        """
        try:
            entries = self.object_store.list(limit=self.page_size)
        except StorageError as e:
            logger.error(f"Sweep aborted, listing failed: {e}", exc_info=True)
            raise StorageError(
                "Failed to list files",
                original_error=e.original_error or e,
                category=ErrorCategory.STORAGE_LIST_FAILED,
            ) from e

        now = self.clock()
        result = SweepResult(scanned=len(entries))
        expired: List[str] = []

        for entry in entries:
            stamp = try_decode_key(entry.key)
            if stamp is None:
                logger.debug(f"Skipping key without expiry metadata: {entry.key}")
                result.skipped.append(entry.key)
                continue
            if stamp.is_expired(now):
                expired.append(entry.key)

        if not expired:
            logger.info(f"Sweep found no expired files among {result.scanned}")
            return result

        try:
            removal = self.object_store.remove(expired)
        except StorageError as e:
            logger.error(f"Batch delete of {len(expired)} files failed: {e}", exc_info=True)
            result.failed = {key: str(e) for key in expired}
            return result

        result.deleted = list(removal.removed)
        result.failed = dict(removal.failed)

        logger.info(
            f"Sweep completed - Scanned: {result.scanned}, "
            f"Deleted: {result.count}, "
            f"Failed: {len(result.failed)}, "
            f"Skipped: {len(result.skipped)}"
        )
        for key, reason in result.failed.items():
            logger.warning(f"Sweep failed to delete {key}: {reason}")

        return result
