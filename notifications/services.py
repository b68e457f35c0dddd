"""
Notifications — Service Layer

Inbox operations for the current user and the two scheduled jobs that
produce and prune notifications.

@file notifications/services.py
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.db.models import Count
from django.utils import timezone

from assets.models import Asset, AssetType
from core.exceptions import ResourceNotFoundError
from users.models import User

from .models import Notification

logger = logging.getLogger('assettrack')


class NotificationService:

    @staticmethod
    def unread_for(user):
        return Notification.objects.filter(user=user, is_read=False).order_by('-created_at')

    @staticmethod
    def mark_read(*, notification_id, user) -> None:
        updated = Notification.objects.filter(pk=notification_id, user=user).update(
            is_read=True, updated_at=timezone.now(),
        )
        if not updated:
            raise ResourceNotFoundError(detail=f'Notification {notification_id} not found.')

    @staticmethod
    def mark_all_read(*, user) -> int:
        return Notification.objects.filter(user=user, is_read=False).update(
            is_read=True, updated_at=timezone.now(),
        )

    @staticmethod
    def delete(*, notification_id, user) -> None:
        deleted, _ = Notification.objects.filter(pk=notification_id, user=user).delete()
        if not deleted:
            raise ResourceNotFoundError(detail=f'Notification {notification_id} not found.')

    @staticmethod
    def cleanup_old(days: int | None = None) -> int:
        """Delete notifications older than ``days`` (NOTIFICATION_RETENTION_DAYS)."""
        if days is None:
            days = settings.NOTIFICATION_RETENTION_DAYS
        cutoff = timezone.now() - timedelta(days=days)
        deleted, _ = Notification.objects.filter(created_at__lt=cutoff).delete()
        return deleted

    @staticmethod
    def low_stock_types() -> list[dict]:
        """
        Types with a positive threshold whose in_stock count is at or
        below it. Types with no in_stock asset at all count as 0.
        """
        in_stock = dict(
            Asset.objects.filter(status=Asset.StatusChoices.IN_STOCK)
            .values('type')
            .annotate(n=Count('id'))
            .values_list('type', 'n')
        )
        rows = []
        for asset_type in AssetType.objects.filter(low_stock_threshold__gt=0).order_by('code'):
            count = in_stock.get(asset_type.code, 0)
            if count <= asset_type.low_stock_threshold:
                rows.append({
                    'code': asset_type.code,
                    'name': asset_type.name,
                    'in_stock': count,
                    'threshold': asset_type.low_stock_threshold,
                })
        return rows

    @classmethod
    @transaction.atomic
    def check_low_stock(cls) -> int:
        """Notify every active admin about low-stock types. Returns the number of alert rows."""
        rows = cls.low_stock_types()
        if not rows:
            return 0

        content = '\n'.join(
            f'{row["name"]} ({row["code"]}): {row["in_stock"]} in stock, threshold {row["threshold"]}'
            for row in rows
        )
        admins = User.objects.active_admins()
        Notification.objects.bulk_create([
            Notification(
                user=admin,
                type=Notification.NotificationType.LOW_STOCK,
                title='Low stock alert',
                content=content,
            )
            for admin in admins
        ])
        logger.info('Low-stock alert sent to %d admins for: %s', len(admins), ', '.join(r['code'] for r in rows))
        return len(rows)
