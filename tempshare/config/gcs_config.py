"""
Google Cloud Storage Configuration

Builds the GCS client from application configuration.
"""

import logging
import os
from typing import Optional

from google.api_core.client_options import ClientOptions
from google.auth.credentials import AnonymousCredentials
from google.cloud import storage
from google.oauth2 import service_account

from tempshare.config.settings import AppConfig

logger = logging.getLogger(__name__)


def create_gcs_client(config: AppConfig) -> storage.Client:
    """
    Create a Google Cloud Storage client.

    Uses the service account file when one is configured, anonymous
    credentials when an endpoint override points at an emulator, and
    application default credentials otherwise.

    Args:
        config: Application configuration

    Returns:
        Configured storage client
    """
    client_options: Optional[ClientOptions] = None
    if config.gcs_endpoint:
        client_options = ClientOptions(api_endpoint=config.gcs_endpoint)

    credentials_path = config.gcs_credentials_path
    if credentials_path and os.path.exists(credentials_path):
        credentials = service_account.Credentials.from_service_account_file(
            credentials_path
        )
        logger.info("GCS client initialized with service account: %s", credentials_path)
        return storage.Client(
            project=config.gcs_project or credentials.project_id,
            credentials=credentials,
            client_options=client_options,
        )

    if config.gcs_endpoint:
        logger.info("GCS client initialized for endpoint %s", config.gcs_endpoint)
        return storage.Client(
            project=config.gcs_project or "tempshare",
            credentials=AnonymousCredentials(),
            client_options=client_options,
        )

    logger.info("GCS client initialized with default credentials")
    return storage.Client(project=config.gcs_project)
