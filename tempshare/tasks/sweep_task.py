"""
Sweep Task

Celery beat task for periodic removal of expired files.
Thin wrapper that delegates to ExpirationSweepService.
"""

import logging

from tempshare.celery_app import celery_app
from tempshare.config.celery_config import SWEEP_TASK_NAME

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name=SWEEP_TASK_NAME)
def delete_expired_files(self):
    """
    Periodic task that removes files whose key-encoded expiry has passed.

    Resolves ExpirationSweepService from the DependencyContainer; the task
    never touches the object store directly. Listing failures are logged and
    reported; the next scheduled run retries whatever is still expired.

    Returns:
        dict: Sweep statistics with deleted keys, failures and errors
    """
    logger.info("Starting expiration sweep task")

    try:
        from tempshare.application.sweep_service import ExpirationSweepService
        from tempshare.celery_app import flask_app

        sweep_service = flask_app.container.resolve(ExpirationSweepService)
        result = sweep_service.sweep()

        stats = result.to_dict()
        stats["errors"] = [f"Failed to delete {key}" for key in stats["failed"]]
        return stats

    except Exception as e:
        error_msg = f"Sweep task failed: {e}"
        logger.error(error_msg, exc_info=True)
        return {
            "deleted": [],
            "count": 0,
            "failed": [],
            "skipped": 0,
            "scanned": 0,
            "errors": [error_msg],
        }
