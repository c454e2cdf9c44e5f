"""
Shared pytest fixtures and configuration for the TempShare test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Application configuration and an in-memory object store
- A Flask app and test client wired to those doubles
"""

import os
import tempfile

import pytest

# Hypothesis configuration
from hypothesis import HealthCheck, Phase, settings

# Modules that build an app at import time (celery_app) must never reach
# real cloud storage during tests.
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("LOCAL_STORAGE_DIR", os.path.join(tempfile.gettempdir(), "tempshare-tests"))

from tempshare.app_factory import create_app  # noqa: E402
from tempshare.config.settings import AppConfig  # noqa: E402
from tests.fixtures import InMemoryObjectStore  # noqa: E402

# Register Hypothesis profiles
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))

SEVEN_DAYS_MS = 7 * 24 * 60 * 60 * 1000


# =============================================================================
# Configuration and Store Fixtures
# =============================================================================

@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """Provide a configuration with a small upload ceiling and 7 day TTL."""
    return AppConfig(
        max_file_size=1024,
        expire_in_ms=SEVEN_DAYS_MS,
        local_storage_dir=str(tmp_path / "store"),
        base_url="http://testserver",
    )


@pytest.fixture
def object_store() -> InMemoryObjectStore:
    """Provide an empty in-memory object store."""
    return InMemoryObjectStore()


class FixedClock:
    """Callable clock returning a settable epoch-millisecond value."""

    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Provide a clock pinned to t=1000 ms."""
    return FixedClock(1000)


# =============================================================================
# Flask Fixtures
# =============================================================================

@pytest.fixture
def flask_app(app_config, object_store):
    """Create Flask app wired to the in-memory store."""
    app = create_app(config=app_config, object_store=object_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(flask_app):
    """Create test client."""
    return flask_app.test_client()


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (real filesystem)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
