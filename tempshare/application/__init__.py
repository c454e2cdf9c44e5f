"""
Application Layer

Use-case services orchestrating the domain and the object store.
"""

from .dependency_container import DependencyContainer, DependencyNotFoundError
from .file_service import FileService
from .sweep_service import ExpirationSweepService, SweepResult
from .upload_service import UploadService

__all__ = [
    "DependencyContainer",
    "DependencyNotFoundError",
    "ExpirationSweepService",
    "FileService",
    "SweepResult",
    "UploadService",
]
