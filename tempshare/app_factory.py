"""
Application Factory

Creates and configures the Flask application with all dependencies.
Configuration and the object store can be injected, which keeps tests free
of environment variables and real storage.
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from tempshare.application.dependency_container import DependencyContainer
from tempshare.application.file_service import FileService
from tempshare.application.sweep_service import ExpirationSweepService
from tempshare.application.upload_service import UploadService
from tempshare.config.celery_config import make_celery
from tempshare.config.settings import AppConfig
from tempshare.domain.file_storage.storage_repository import IObjectStore
from tempshare.infrastructure.storage_factory import StorageFactory

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Logging level name
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tempshare").setLevel(level)


def create_app(
    config: Optional[AppConfig] = None,
    object_store: Optional[IObjectStore] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Application configuration, read from the environment if None
        object_store: Object store to use, built by StorageFactory if None

    Returns:
        Configured Flask application
    """
    if config is None:
        config = AppConfig.from_env()

    configure_logging(config.log_level)

    app = Flask(__name__)
    app.config["TEMPSHARE"] = config

    # Configure CORS
    CORS(
        app,
        resources={
            r"/*": {
                "origins": "*",
                "methods": ["GET", "POST", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type"],
                "send_wildcard": True,
            }
        },
    )

    if object_store is None:
        object_store = StorageFactory.create_storage(config)

    _initialize_services(app, config, object_store)

    app.celery = make_celery(app)

    _register_blueprints(app)

    _register_health_endpoint(app)

    return app


def _initialize_services(app: Flask, config: AppConfig, object_store: IObjectStore) -> None:
    """
    Build application services and attach the container to the app.

    Args:
        app: Flask application
        config: Application configuration
        object_store: Store shared by every service
    """
    container = DependencyContainer()

    container.register_singleton(AppConfig, config)
    container.register_singleton(IObjectStore, object_store)

    container.register_singleton(UploadService, UploadService(object_store, config))
    container.register_singleton(FileService, FileService(object_store))
    container.register_singleton(
        ExpirationSweepService,
        ExpirationSweepService(object_store, page_size=config.sweep_page_size),
    )

    app.container = container

    logger.info(
        f"Services initialized - max file size: {config.max_file_size} bytes, "
        f"expire in: {config.expire_in_ms} ms, backend: {config.storage_backend}"
    )


def _register_blueprints(app: Flask) -> None:
    """
    Register API blueprints.

    Args:
        app: Flask application
    """
    from tempshare.api import api_bp

    app.register_blueprint(api_bp)

    logger.info("API registered with Swagger UI at /docs")


def _get_health_status(app: Flask) -> tuple[dict, int]:
    """
    Get health status of the object store.

    Args:
        app: Flask application instance

    Returns:
        Tuple of (health_status_dict, http_status_code)
    """
    health_status = {
        "status": "ok",
        "message": "backend ready",
        "storage": "unknown",
    }

    store = app.container.resolve(IObjectStore)
    if store.health_check():
        health_status["storage"] = "connected"
    else:
        health_status["storage"] = "disconnected"
        health_status["status"] = "degraded"

    status_code = 200 if health_status["status"] == "ok" else 503
    return health_status, status_code


def _register_health_endpoint(app: Flask) -> None:
    """
    Register health check endpoint.

    Args:
        app: Flask application
    """

    @app.route("/health", methods=["GET"])
    def health():
        """
        Health check endpoint.
        Returns overall health status of the application and its object store.
        """
        health_status, status_code = _get_health_status(app)
        return jsonify(health_status), status_code
