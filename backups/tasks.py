"""
Backups — Celery Tasks

@file backups/tasks.py
"""

import logging

from celery import shared_task

logger = logging.getLogger('assettrack')


@shared_task(name='backups.nightly_backup')
def nightly_backup_task():
    """Daily at 03:00: snapshot the database and apply retention."""
    from .store import get_backup_store

    backup = get_backup_store().create()
    logger.info('nightly_backup_task completed: %s (%d bytes).', backup['name'], backup['size'])
    return {'name': backup['name'], 'size': backup['size']}
