"""
Notifications — Celery Tasks

Scheduled by Celery Beat (see CELERY_BEAT_SCHEDULE).

@file notifications/tasks.py
"""

import logging

from celery import shared_task

logger = logging.getLogger('assettrack')


@shared_task(name='notifications.check_low_stock')
def check_low_stock_task():
    """Daily at 09:00: alert admins about types at or below their threshold."""
    from .services import NotificationService

    count = NotificationService.check_low_stock()
    logger.info('check_low_stock_task completed: %d low-stock types.', count)
    return {'low_stock_count': count}


@shared_task(name='notifications.cleanup_old')
def cleanup_old_notifications_task():
    from .services import NotificationService

    count = NotificationService.cleanup_old()
    logger.info('cleanup_old_notifications_task completed: %d notifications deleted.', count)
    return {'deleted_count': count}
