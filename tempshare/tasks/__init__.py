"""
Celery Tasks

Background tasks run by the Celery worker and scheduled by beat.
"""
