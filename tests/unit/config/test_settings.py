"""
Unit tests for environment-sourced configuration.
"""

import pytest

from tempshare.config.settings import AppConfig, parse_expire_time, parse_file_size
from tempshare.domain.errors import ConfigurationError


class TestParseFileSize:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("50MB", 50 * 1024 * 1024),
            ("50mb", 50 * 1024 * 1024),
            ("512KB", 512 * 1024),
            ("2GB", 2 * 1024 * 1024 * 1024),
            ("1000", 1000),
        ],
    )
    def test_units(self, value, expected):
        assert parse_file_size(value) == expected

    @pytest.mark.parametrize("value", ["", "fifty", "5 MB", "5TB", "-1"])
    def test_invalid_values(self, value):
        with pytest.raises(ConfigurationError):
            parse_file_size(value)


class TestParseExpireTime:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("7d", 604800000),
            ("12h", 12 * 60 * 60 * 1000),
            ("30m", 30 * 60 * 1000),
            ("45s", 45000),
            ("45S", 45000),
            ("1500", 1500),
        ],
    )
    def test_units(self, value, expected):
        assert parse_expire_time(value) == expected

    @pytest.mark.parametrize("value", ["", "week", "7w", "1.5h"])
    def test_invalid_values(self, value):
        with pytest.raises(ConfigurationError):
            parse_expire_time(value)


class TestAppConfigFromEnv:

    def test_defaults(self):
        config = AppConfig.from_env({})

        assert config.max_file_size == 50 * 1024 * 1024
        assert config.expire_in_ms == 604800000
        assert config.bucket_name == "temp-files"
        assert config.storage_backend == "local"
        assert config.cdn_url == ""
        assert config.sweep_page_size == 1000

    def test_reads_values_and_strips_trailing_slashes(self):
        config = AppConfig.from_env(
            {
                "MAX_FILE_SIZE": "10MB",
                "EXPIRE_IN": "1h",
                "BUCKET_NAME": "shares",
                "STORAGE_BACKEND": "GCS",
                "BASE_URL": "https://share.example.com/",
                "CDN_URL": "https://cdn.example.com/",
                "GCS_ENDPOINT": "http://localhost:4443",
                "LOG_LEVEL": "debug",
            }
        )

        assert config.max_file_size == 10 * 1024 * 1024
        assert config.expire_in_ms == 3600000
        assert config.bucket_name == "shares"
        assert config.storage_backend == "gcs"
        assert config.base_url == "https://share.example.com"
        assert config.cdn_url == "https://cdn.example.com"
        assert config.gcs_endpoint == "http://localhost:4443"
        assert config.log_level == "DEBUG"

    def test_empty_optional_values_become_none(self):
        config = AppConfig.from_env({"GOOGLE_APPLICATION_CREDENTIALS": "", "GCS_PROJECT": ""})

        assert config.gcs_credentials_path is None
        assert config.gcs_project is None

    @pytest.mark.parametrize(
        "env",
        [
            {"MAX_FILE_SIZE": "0"},
            {"EXPIRE_IN": "0d"},
            {"STORAGE_BACKEND": "s3"},
            {"SWEEP_PAGE_SIZE": "many"},
            {"SWEEP_PAGE_SIZE": "0"},
        ],
    )
    def test_rejects_invalid_settings(self, env):
        with pytest.raises(ConfigurationError):
            AppConfig.from_env(env)
