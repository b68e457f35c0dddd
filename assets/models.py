"""
Assets — Models

Asset registry, asset type catalog and the append-only Operation Log.

Status lifecycle:  in_stock → in_use → {in_stock, scrapped}
``scrapped`` is terminal. Status changes only through conditional
single-statement updates (see AssetQuerySet) so that two concurrent
requests can never both move the same asset.

@file assets/models.py
"""

import uuid

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.db import models
from django.db.models import Case, F, Q, Value, When
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.constants import (
    ASSET_STATUS_IN_STOCK,
    ASSET_STATUS_IN_USE,
    ASSET_STATUS_SCRAPPED,
    OPERATION_RETURN,
    OPERATION_SCRAP,
)
from core.models import BaseModel


# ---------------------------------------------------------------------------
# Asset type catalog
# ---------------------------------------------------------------------------

class AssetType(BaseModel):
    """
    Named asset category. Assets reference a type by ``code``.
    ``low_stock_threshold`` > 0 enables the daily low-stock alert.
    """

    code = models.CharField(_('code'), max_length=50, unique=True)
    name = models.CharField(_('name'), max_length=100)
    description = models.TextField(_('description'), blank=True)
    low_stock_threshold = models.PositiveIntegerField(
        _('low stock threshold'), default=0,
        help_text=_('Alert admins when in-stock units fall to this level. 0 disables.'),
    )

    class Meta:
        verbose_name = _('asset type')
        verbose_name_plural = _('asset types')
        ordering = ['code']

    def __str__(self):
        return f'{self.name} ({self.code})'


# ---------------------------------------------------------------------------
# Asset
# ---------------------------------------------------------------------------

class AssetQuerySet(models.QuerySet):

    def claim_for_stock_out(self, *, asset_id, record, department: str, code: str) -> int:
        """
        Compare-and-swap: move one asset in_stock → in_use under ``record``.

        The asset keeps its existing code; ``code`` is only written when
        the asset has none. Returns the affected row count (0 or 1).
        """
        return self.filter(pk=asset_id, status=ASSET_STATUS_IN_STOCK).update(
            status=ASSET_STATUS_IN_USE,
            last_stock_out=record,
            department=department,
            code=Case(
                When(Q(code__isnull=True) | Q(code=''), then=Value(code)),
                default=F('code'),
            ),
            updated_at=timezone.now(),
        )

    def release(self, *, asset_id) -> int:
        """Compare-and-swap: in_use → in_stock, clearing the stock-out link."""
        return self.filter(pk=asset_id, status=ASSET_STATUS_IN_USE).update(
            status=ASSET_STATUS_IN_STOCK,
            last_stock_out=None,
            updated_at=timezone.now(),
        )

    def retire(self, *, asset_id) -> int:
        """Compare-and-swap: {in_stock, in_use} → scrapped."""
        return self.filter(
            pk=asset_id,
            status__in=[ASSET_STATUS_IN_STOCK, ASSET_STATUS_IN_USE],
        ).update(
            status=ASSET_STATUS_SCRAPPED,
            last_stock_out=None,
            updated_at=timezone.now(),
        )


class Asset(BaseModel):
    """
    One physical IT asset. Created manually or, one row per unit, by a
    stock-in batch. ``code`` stays empty until the first stock-out
    unless set explicitly.
    """

    class StatusChoices(models.TextChoices):
        IN_STOCK = ASSET_STATUS_IN_STOCK, _('In stock')
        IN_USE = ASSET_STATUS_IN_USE, _('In use')
        SCRAPPED = ASSET_STATUS_SCRAPPED, _('Scrapped')

    code = models.CharField(
        _('code'), max_length=64, unique=True, null=True, blank=True,
    )
    name = models.CharField(_('name'), max_length=200)
    type = models.CharField(_('type'), max_length=50, db_index=True)
    status = models.CharField(
        _('status'), max_length=10,
        choices=StatusChoices.choices, default=StatusChoices.IN_STOCK,
        db_index=True,
    )
    department = models.CharField(_('department'), max_length=100, null=True, blank=True)
    description = models.TextField(_('description'), blank=True)
    last_stock_out = models.ForeignKey(
        'stock.StockOutRecord',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='current_assets',
        verbose_name=_('last stock-out'),
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='+',
        verbose_name=_('created by'),
    )

    objects = AssetQuerySet.as_manager()

    class Meta:
        verbose_name = _('asset')
        verbose_name_plural = _('assets')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['type', 'status'], name='asset_type_status_idx'),
            models.Index(fields=['department'], name='asset_department_idx'),
        ]

    def __str__(self):
        return f'{self.code or self.pk} {self.name}'


# ---------------------------------------------------------------------------
# Operation Log
# ---------------------------------------------------------------------------

class AssetOperation(models.Model):
    """
    Append-only record of a return or scrap action (insert only).
    Stock-in and stock-out are recorded by their own ledgers.
    """

    class OperationType(models.TextChoices):
        RETURN = OPERATION_RETURN, _('Return')
        SCRAP = OPERATION_SCRAP, _('Scrap')

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    asset = models.ForeignKey(
        Asset,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='operations',
        verbose_name=_('asset'),
    )
    operation_type = models.CharField(
        _('operation type'), max_length=10,
        choices=OperationType.choices, db_index=True,
    )
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='+',
        verbose_name=_('operator'),
    )
    notes = models.TextField(_('notes'), blank=True)
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)
    # No updated_at: immutable record.

    class Meta:
        verbose_name = _('asset operation')
        verbose_name_plural = _('asset operations')
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.operation_type} asset={self.asset_id}'

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise PermissionDenied('AssetOperation is insert-only; updates are not allowed.')
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise PermissionDenied('AssetOperation records cannot be deleted.')
