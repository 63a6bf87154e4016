"""
Celery Configuration for ewtrack
Background task processing with Redis broker
"""
import os
from celery import Celery
from celery.schedules import crontab

# Get Redis URL from environment or use local default
REDIS_URL = os.environ.get('REDIS_URL', 'redis://localhost:6379/0')

celery = Celery(
    'ewtrack',
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=['ewtrack.tasks']
)

celery.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=600,
    task_soft_time_limit=540,
    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=100,
)

celery.conf.task_routes = {
    'ewtrack.tasks.close_expired_auctions': {'queue': 'default'},
}

# Celery Beat Schedule (Periodic Tasks)
celery.conf.beat_schedule = {
    'close-expired-auctions-every-15-minutes': {
        'task': 'ewtrack.tasks.close_expired_auctions',
        'schedule': crontab(minute='*/15'),
        'options': {
            'expires': 60 * 10,  # Expire after 10 minutes if not picked up
        }
    },
}

if __name__ == '__main__':
    celery.start()
