"""
Infrastructure Layer

Object store adapters and the factory that selects between them.
"""

from .local_object_store import LocalObjectStore
from .storage_factory import StorageFactory

__all__ = ["LocalObjectStore", "StorageFactory"]
