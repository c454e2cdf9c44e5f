"""
Dependency Injection Container

Holds the service instances built by the app factory so HTTP resources and
Celery tasks resolve the same objects.
"""

import logging
import threading
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DependencyNotFoundError(Exception):
    """Raised when resolving a type that was never registered."""
    pass


class DependencyContainer:
    """
    Type-keyed registry of shared service instances.

    Overrides shadow registrations, which lets tests swap in doubles on an
    app that is already built.
    """

    def __init__(self):
        self._services: Dict[Type, Any] = {}
        self._overrides: Dict[Type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """
        Register the instance returned for ``interface``.

        Example:
            container.register_singleton(IObjectStore, store)
        """
        with self._lock:
            self._services[interface] = implementation
        logger.debug(f"Registered {interface.__name__}")

    def resolve(self, interface: Type[T]) -> T:
        """
        Return the instance registered for ``interface``.

        Raises:
            DependencyNotFoundError: If nothing is registered for the type
        """
        with self._lock:
            if interface in self._overrides:
                return self._overrides[interface]
            try:
                return self._services[interface]
            except KeyError:
                raise DependencyNotFoundError(
                    f"No registration found for type: {interface.__name__}"
                ) from None

    def override(self, interface: Type[T], implementation: T) -> None:
        """Shadow the registration for ``interface`` with another instance."""
        with self._lock:
            self._overrides[interface] = implementation
        logger.debug(f"Overridden {interface.__name__}")
