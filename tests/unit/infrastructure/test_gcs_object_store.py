"""
Unit tests for GCSObjectStore

The storage client is mocked; these tests cover how bucket calls are made
and how google-cloud errors are translated into StorageError.
"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from google.cloud.exceptions import GoogleCloudError, NotFound

from tempshare.application.sweep_service import ExpirationSweepService
from tempshare.domain.errors import ErrorCategory, StorageError
from tempshare.infrastructure.gcs_object_store import GCSObjectStore


@pytest.fixture
def mock_bucket():
    return Mock()


@pytest.fixture
def mock_client(mock_bucket):
    client = Mock()
    client.bucket.return_value = mock_bucket
    return client


@pytest.fixture
def store(mock_client):
    return GCSObjectStore(mock_client, "temp-files")


def _blob(name, size=10, content_type="text/plain"):
    blob = Mock()
    blob.name = name
    blob.size = size
    blob.content_type = content_type
    blob.time_created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return blob


class TestConstruction:

    def test_empty_bucket_name_rejected(self, mock_client):
        with pytest.raises(ValueError):
            GCSObjectStore(mock_client, "  ")

    def test_binds_bucket(self, mock_client, mock_bucket):
        store = GCSObjectStore(mock_client, "temp-files")

        mock_client.bucket.assert_called_once_with("temp-files")
        assert store.bucket is mock_bucket


class TestList:

    def test_maps_blobs_to_stored_objects(self, store, mock_client):
        mock_client.list_blobs.return_value = [_blob("1-2-a.txt", size=3)]

        entries = store.list()

        assert len(entries) == 1
        assert entries[0].key == "1-2-a.txt"
        assert entries[0].size == 3
        assert entries[0].content_type == "text/plain"
        mock_client.list_blobs.assert_called_once_with(
            "temp-files", prefix=None, max_results=1000
        )

    def test_passes_prefix_and_limit(self, store, mock_client):
        mock_client.list_blobs.return_value = []

        store.list(prefix="1-2-a.txt", limit=5)

        mock_client.list_blobs.assert_called_once_with(
            "temp-files", prefix="1-2-a.txt", max_results=5
        )

    def test_cloud_error_is_list_failure(self, store, mock_client):
        mock_client.list_blobs.side_effect = GoogleCloudError("unavailable")

        with pytest.raises(StorageError) as exc_info:
            store.list()

        assert exc_info.value.category is ErrorCategory.STORAGE_LIST_FAILED


class TestUpload:

    def test_uploads_with_content_type(self, store, mock_bucket):
        blob = Mock()
        mock_bucket.blob.return_value = blob

        store.upload("1-2-a.pdf", b"data", content_type="application/pdf")

        mock_bucket.blob.assert_called_once_with("1-2-a.pdf")
        blob.upload_from_string.assert_called_once_with(b"data", content_type="application/pdf")

    def test_missing_content_type_defaults_to_binary(self, store, mock_bucket):
        blob = Mock()
        mock_bucket.blob.return_value = blob

        store.upload("1-2-a.bin", b"data")

        blob.upload_from_string.assert_called_once_with(
            b"data", content_type="application/octet-stream"
        )

    def test_cloud_error_is_write_failure(self, store, mock_bucket):
        mock_bucket.blob.return_value.upload_from_string.side_effect = GoogleCloudError("denied")

        with pytest.raises(StorageError) as exc_info:
            store.upload("1-2-a.txt", b"a")

        assert exc_info.value.category is ErrorCategory.STORAGE_WRITE_FAILED
        assert isinstance(exc_info.value.original_error, GoogleCloudError)


class TestDownload:

    def test_returns_bytes(self, store, mock_bucket):
        mock_bucket.blob.return_value.download_as_bytes.return_value = b"hello"

        assert store.download("1-2-a.txt") == b"hello"

    def test_missing_blob_returns_none(self, store, mock_bucket):
        mock_bucket.blob.return_value.download_as_bytes.side_effect = NotFound("gone")

        assert store.download("1-2-a.txt") is None

    def test_cloud_error_is_read_failure(self, store, mock_bucket):
        mock_bucket.blob.return_value.download_as_bytes.side_effect = GoogleCloudError("boom")

        with pytest.raises(StorageError) as exc_info:
            store.download("1-2-a.txt")

        assert exc_info.value.category is ErrorCategory.STORAGE_READ_FAILED


class TestRemove:

    def test_removes_each_key(self, store, mock_bucket):
        result = store.remove(["a", "b"])

        assert result.removed == ["a", "b"]
        assert result.failed == {}
        assert mock_bucket.delete_blob.call_count == 2

    def test_already_absent_counts_as_removed(self, store, mock_bucket):
        mock_bucket.delete_blob.side_effect = NotFound("gone")

        result = store.remove(["a"])

        assert result.removed == ["a"]
        assert result.succeeded

    def test_failures_are_collected_per_key(self, store, mock_bucket):
        def delete_blob(key):
            if key == "stuck":
                raise GoogleCloudError("denied")

        mock_bucket.delete_blob.side_effect = delete_blob

        result = store.remove(["ok", "stuck"])

        assert result.removed == ["ok"]
        assert list(result.failed) == ["stuck"]
        assert not result.succeeded

    def test_transport_errors_are_collected_per_key(self, store, mock_bucket):
        def delete_blob(key):
            if key == "stuck":
                raise ConnectionError("conn reset")

        mock_bucket.delete_blob.side_effect = delete_blob

        result = store.remove(["stuck", "ok"])

        assert result.removed == ["ok"]
        assert list(result.failed) == ["stuck"]

    def test_sweep_reports_transport_failure_as_partial(self, store, mock_client, mock_bucket):
        mock_client.list_blobs.return_value = [_blob("1-2-old.txt")]
        mock_bucket.delete_blob.side_effect = ConnectionError("conn reset")
        sweep_service = ExpirationSweepService(store, clock=lambda: 10_000)

        result = sweep_service.sweep()

        assert result.deleted == []
        assert list(result.failed) == ["1-2-old.txt"]


class TestPublicUrl:

    def test_uses_blob_public_url(self, store, mock_bucket):
        mock_bucket.blob.return_value.public_url = (
            "https://storage.googleapis.com/temp-files/1-2-a.txt"
        )

        assert store.public_url("1-2-a.txt") == (
            "https://storage.googleapis.com/temp-files/1-2-a.txt"
        )


class TestHealthCheck:

    def test_healthy_when_listing_works(self, store, mock_client):
        mock_client.list_blobs.return_value = []

        assert store.health_check() is True

    def test_unhealthy_when_listing_fails(self, store, mock_client):
        mock_client.list_blobs.side_effect = GoogleCloudError("down")

        assert store.health_check() is False
