"""
Celery Configuration

Configures Celery with Flask integration, Redis broker, and the beat
schedule that drives the expiration sweep.
"""

import os

from celery import Celery
from kombu import Queue

SWEEP_TASK_NAME = "tempshare.tasks.delete_expired_files"


class CeleryConfig:
    """Celery configuration settings."""

    # Broker settings
    broker_url = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    result_backend = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")

    # Task settings
    task_serializer = "json"
    accept_content = ["json"]
    result_serializer = "json"
    timezone = "UTC"
    enable_utc = True

    # Worker settings
    worker_prefetch_multiplier = 1
    task_acks_late = True

    # Task routing
    task_routes = {
        SWEEP_TASK_NAME: {"queue": "cleanup_queue"},
    }

    # Queue definitions
    task_default_queue = "default"
    task_queues = (
        Queue("default", routing_key="default"),
        Queue("cleanup_queue", routing_key="cleanup"),
    )

    # Result backend settings
    result_expires = 3600  # 1 hour


def make_celery(app) -> Celery:
    """
    Create Celery instance with Flask app context.

    The sweep interval comes from ``app.config["TEMPSHARE"]`` so the beat
    schedule follows the same configuration the HTTP trigger uses.

    Args:
        app: Flask application instance

    Returns:
        Configured Celery instance
    """
    celery = Celery(
        app.import_name,
        backend=CeleryConfig.result_backend,
        broker=CeleryConfig.broker_url,
    )

    celery.config_from_object(CeleryConfig)

    settings = app.config["TEMPSHARE"]
    celery.conf.beat_schedule = {
        "delete-expired-files": {
            "task": SWEEP_TASK_NAME,
            "schedule": float(settings.sweep_interval_seconds),
        },
    }

    # Ensure tasks run within Flask app context
    class ContextTask(celery.Task):
        """Make celery tasks work with Flask app context."""

        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery.Task = ContextTask
    return celery
