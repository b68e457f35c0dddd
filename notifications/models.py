"""
Notifications — Models

Per-user inbox messages raised by scheduled jobs (low-stock alerts).

@file notifications/models.py
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.models import BaseModel


class Notification(BaseModel):

    class NotificationType(models.TextChoices):
        LOW_STOCK = 'low_stock', _('Low stock')
        SYSTEM = 'system', _('System')

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications',
        verbose_name=_('user'),
    )
    type = models.CharField(
        _('type'), max_length=20,
        choices=NotificationType.choices, default=NotificationType.SYSTEM,
    )
    title = models.CharField(_('title'), max_length=200)
    content = models.TextField(_('content'))
    is_read = models.BooleanField(_('read'), default=False)

    class Meta:
        verbose_name = _('notification')
        verbose_name_plural = _('notifications')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notification_user_read_idx'),
        ]

    def __str__(self):
        return f'{self.title} → {self.user_id}'
