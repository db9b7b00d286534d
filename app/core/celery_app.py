"""
Celery Configuration
"""
from celery import Celery
from app.core.config import settings
from celery.schedules import crontab

# Create Celery app
celery_app = Celery(
    "isupipe",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
)

# Import tasks to register them
from app import tasks  # noqa: F401

# Configure Celery
celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone=settings.CELERY_TIMEZONE,
    enable_utc=True,

    # Worker settings
    worker_prefetch_multiplier=1,
    task_acks_late=True,

    # Result settings
    result_expires=3600,

    # Task time limits
    task_soft_time_limit=300,
    task_time_limit=600,

    # Beat schedule
    beat_schedule={
        'cleanup-stale-viewers-hourly': {
            'task': 'app.tasks.cleanup.cleanup_stale_viewers',
            'schedule': crontab(minute=0, hour='*'),
        },
    },
)
