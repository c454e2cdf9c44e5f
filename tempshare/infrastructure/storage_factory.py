"""
Storage Factory

Factory for creating the object store implementation selected by
``STORAGE_BACKEND``. The application layer stays decoupled from the concrete
implementation via the `IObjectStore` interface.
"""

import logging

from tempshare.config.settings import AppConfig
from tempshare.domain.file_storage.storage_repository import IObjectStore

logger = logging.getLogger(__name__)


class StorageFactory:
    """Factory that returns the configured object store."""

    @staticmethod
    def create_storage(config: AppConfig) -> IObjectStore:
        """
        Create the object store for the configured backend.

        Args:
            config: Application configuration

        Returns:
            `IObjectStore` implementation

        Raises:
            RuntimeError: If the store cannot be initialized
        """
        if config.storage_backend == "gcs":
            return StorageFactory._create_gcs_storage(config)
        return StorageFactory._create_local_storage(config)

    @staticmethod
    def _create_gcs_storage(config: AppConfig) -> IObjectStore:
        try:
            from tempshare.config.gcs_config import create_gcs_client
            from tempshare.infrastructure.gcs_object_store import GCSObjectStore

            store = GCSObjectStore(create_gcs_client(config), config.bucket_name)
            logger.info("Storage factory: Using GCS bucket %s", config.bucket_name)
            return store
        except Exception as e:
            raise RuntimeError(f"Failed to initialize GCS storage: {e}") from e

    @staticmethod
    def _create_local_storage(config: AppConfig) -> IObjectStore:
        try:
            from tempshare.infrastructure.local_object_store import LocalObjectStore

            store = LocalObjectStore(config.local_storage_dir, public_base_url=config.base_url)
            logger.info(
                "Storage factory: Using local filesystem storage at %s",
                config.local_storage_dir,
            )
            return store
        except Exception as e:
            raise RuntimeError(f"Failed to initialize local storage: {e}") from e
