"""
Stock — Models

Stock-in and stock-out ledgers. Each batch is one header row owning
per-item detail rows. Batch totals are never stored; they are
aggregated from items at read time.

@file stock/models.py
"""

import uuid
from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Count, ExpressionWrapper, F, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


# ---------------------------------------------------------------------------
# Stock-in ledger
# ---------------------------------------------------------------------------

AMOUNT_FIELD = models.DecimalField(max_digits=14, decimal_places=2)


class StockInQuerySet(models.QuerySet):

    def with_totals(self):
        """Annotate item count, unit count and Σ(quantity × unit_price)."""
        line_amount = ExpressionWrapper(
            F('items__quantity') * F('items__unit_price'), output_field=AMOUNT_FIELD,
        )
        return self.annotate(
            total_items=Count('items'),
            total_quantity=Coalesce(Sum('items__quantity'), Value(0), output_field=models.IntegerField()),
            total_amount=Coalesce(
                Sum(line_amount), Value(Decimal('0.00')), output_field=AMOUNT_FIELD,
            ),
        )


class StockInRecord(models.Model):
    """
    One incoming batch. Creating it creates ``quantity`` in_stock Asset
    rows per item (see StockInService).
    """

    class SourceType(models.TextChoices):
        PURCHASE = 'purchase', _('Purchase')
        TRANSFER = 'transfer', _('Transfer')
        DONATION = 'donation', _('Donation')
        OTHER = 'other', _('Other')

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    batch_no = models.CharField(_('batch number'), max_length=64, unique=True)
    type = models.CharField(
        _('source type'), max_length=20,
        choices=SourceType.choices, default=SourceType.PURCHASE,
    )
    supplier = models.CharField(_('supplier'), max_length=200, blank=True)
    in_date = models.DateField(_('stock-in date'), default=timezone.localdate)
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='+',
        verbose_name=_('operator'),
    )
    notes = models.TextField(_('notes'), blank=True)
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)

    objects = StockInQuerySet.as_manager()

    class Meta:
        verbose_name = _('stock-in record')
        verbose_name_plural = _('stock-in records')
        ordering = ['-created_at']

    def __str__(self):
        return self.batch_no


class StockInItem(models.Model):
    """
    One line of a stock-in batch. ``asset`` points at the first of the
    units created for this line.
    """

    record = models.ForeignKey(
        StockInRecord,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name=_('stock-in record'),
    )
    asset = models.ForeignKey(
        'assets.Asset',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='stock_in_items',
        verbose_name=_('asset'),
    )
    quantity = models.PositiveIntegerField(_('quantity'))
    unit_price = models.DecimalField(_('unit price'), max_digits=12, decimal_places=2)

    class Meta:
        verbose_name = _('stock-in item')
        verbose_name_plural = _('stock-in items')

    def __str__(self):
        return f'{self.record_id} × {self.quantity}'


# ---------------------------------------------------------------------------
# Stock-out ledger
# ---------------------------------------------------------------------------

class StockOutQuerySet(models.QuerySet):

    def with_counts(self):
        return self.annotate(total_items=Count('items'))


class StockOutRecord(models.Model):
    """
    One outgoing batch. Every asset referenced by its items is in_use
    with ``last_stock_out`` pointing back here until returned or
    scrapped.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    batch_no = models.CharField(_('batch number'), max_length=64, unique=True)
    recipient = models.CharField(_('recipient'), max_length=150)
    department = models.CharField(_('department'), max_length=100)
    out_date = models.DateField(_('stock-out date'), default=timezone.localdate, db_index=True)
    operator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='+',
        verbose_name=_('operator'),
    )
    notes = models.TextField(_('notes'), blank=True)
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)

    objects = StockOutQuerySet.as_manager()

    class Meta:
        verbose_name = _('stock-out record')
        verbose_name_plural = _('stock-out records')
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.batch_no} → {self.recipient}'


class StockOutItem(models.Model):

    record = models.ForeignKey(
        StockOutRecord,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name=_('stock-out record'),
    )
    asset = models.ForeignKey(
        'assets.Asset',
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name='stock_out_items',
        verbose_name=_('asset'),
    )

    class Meta:
        verbose_name = _('stock-out item')
        verbose_name_plural = _('stock-out items')
        constraints = [
            models.UniqueConstraint(fields=['record', 'asset'], name='unique_stock_out_asset'),
        ]

    def __str__(self):
        return f'{self.record_id} ← {self.asset_id}'
