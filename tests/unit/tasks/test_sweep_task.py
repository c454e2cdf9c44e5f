"""
Unit tests for the delete_expired_files Celery task

The task must resolve ExpirationSweepService from the container, report
sweep statistics, and never raise.
"""

from unittest.mock import MagicMock, Mock, patch

import pytest

from tempshare.application.sweep_service import ExpirationSweepService, SweepResult
from tempshare.domain.errors import StorageError
from tempshare.tasks.sweep_task import delete_expired_files


@pytest.fixture
def mock_sweep_service():
    mock = Mock()
    mock.sweep.return_value = SweepResult(
        deleted=["1-2-a.txt"], failed={"1-2-b.txt": "denied"}, skipped=["junk"], scanned=3
    )
    return mock


@pytest.fixture
def mock_flask_app(mock_sweep_service):
    mock_app = MagicMock()
    mock_app.container.resolve.return_value = mock_sweep_service
    return mock_app


class TestSweepTask:

    def test_resolves_sweep_service_from_container(self, mock_flask_app):
        with patch("tempshare.celery_app.flask_app", mock_flask_app):
            delete_expired_files()

        mock_flask_app.container.resolve.assert_called_once_with(ExpirationSweepService)

    def test_reports_statistics(self, mock_flask_app):
        with patch("tempshare.celery_app.flask_app", mock_flask_app):
            stats = delete_expired_files()

        assert stats["deleted"] == ["1-2-a.txt"]
        assert stats["count"] == 1
        assert stats["skipped"] == 1
        assert stats["scanned"] == 3
        assert stats["failed"] == ["1-2-b.txt"]
        assert stats["errors"] == ["Failed to delete 1-2-b.txt"]

    def test_listing_failure_is_reported_not_raised(self, mock_flask_app, mock_sweep_service):
        mock_sweep_service.sweep.side_effect = StorageError("Failed to list files")

        with patch("tempshare.celery_app.flask_app", mock_flask_app):
            stats = delete_expired_files()

        assert stats["count"] == 0
        assert stats["deleted"] == []
        assert len(stats["errors"]) == 1
        assert "Failed to list files" in stats["errors"][0]
