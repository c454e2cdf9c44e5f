"""
Celery Application Instance

Creates the Celery app instance for use by workers and the beat scheduler.
Uses the app factory so tasks resolve the same services as HTTP handlers.

    celery -A tempshare.celery_app worker -Q cleanup_queue
    celery -A tempshare.celery_app beat
"""

from tempshare.app_factory import create_app

# Create Flask app with all services initialized (including dependency container)
flask_app = create_app()

# Get Celery instance from Flask app
celery_app = flask_app.celery

# Task modules are imported by the worker at startup, once `celery_app`
# exists, which avoids the tasks -> celery_app -> tasks import cycle.
celery_app.conf.imports = ("tempshare.tasks.sweep_task",)
