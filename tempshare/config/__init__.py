"""
Configuration

Environment parsing, Celery and Google Cloud Storage setup.
"""

from .settings import AppConfig, parse_expire_time, parse_file_size

__all__ = ["AppConfig", "parse_expire_time", "parse_file_size"]
