"""
Shared test fixtures and doubles.
"""

from .mock_repositories import InMemoryObjectStore

__all__ = ["InMemoryObjectStore"]
