"""
Stock — Service Layer

Stock-in and stock-out batch processors. Each batch is one database
transaction: any failing item rolls back the header and every asset
write made so far.

Stock-out claims each asset with a compare-and-swap update on
status='in_stock' (AssetQuerySet.claim_for_stock_out), so a
concurrent assign of the same asset fails instead of double-booking.

@file stock/services.py
"""

import logging
import uuid
from datetime import date
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.utils import timezone

from assets.models import Asset
from core.constants import ASSET_CODE_PREFIX, STOCK_IN_BATCH_PREFIX, STOCK_OUT_BATCH_PREFIX
from core.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DuplicateResourceError,
    InvalidStateTransition,
    ResourceNotFoundError,
)

from .models import StockInItem, StockInRecord, StockOutItem, StockOutRecord

logger = logging.getLogger('assettrack')

STOCK_IN_REQUIRED_FIELDS = ('name', 'type', 'department', 'quantity', 'unit_price')


def generate_batch_no(prefix: str) -> str:
    """``<prefix>-<epoch milliseconds>``, e.g. IN-1718000000000."""
    return f'{prefix}-{int(timezone.now().timestamp() * 1000)}'


def generate_asset_code(asset_id) -> str:
    """``AST-<full uuid hex>``; unique because the asset id is."""
    return f'{ASSET_CODE_PREFIX}-{uuid.UUID(str(asset_id)).hex.upper()}'


class StockInService:
    """Incoming batches: one header, item lines, and one Asset row per unit."""

    @staticmethod
    def _validate_items(items: list[dict]) -> None:
        if not items:
            raise BusinessRuleViolation(detail='At least one item is required.')
        for index, item in enumerate(items):
            missing = [f for f in STOCK_IN_REQUIRED_FIELDS if item.get(f) in (None, '')]
            if missing:
                raise BusinessRuleViolation(
                    detail=f'Item {index + 1} is missing: {", ".join(missing)}.',
                )
            if int(item['quantity']) <= 0:
                raise BusinessRuleViolation(detail=f'Item {index + 1}: quantity must be positive.')
            if Decimal(item['unit_price']) < 0:
                raise BusinessRuleViolation(detail=f'Item {index + 1}: unit price cannot be negative.')

    @classmethod
    @transaction.atomic
    def create_stock_in(
        cls,
        *,
        items: list[dict],
        batch_no: str | None = None,
        type: str = StockInRecord.SourceType.PURCHASE,
        supplier: str = '',
        in_date: date | None = None,
        notes: str = '',
        operator=None,
    ) -> StockInRecord:
        """
        Record an incoming batch. For every item, ``quantity`` in_stock
        assets are created and the item line references the first one.
        """
        cls._validate_items(items)

        batch_no = batch_no or generate_batch_no(STOCK_IN_BATCH_PREFIX)
        if StockInRecord.objects.filter(batch_no=batch_no).exists():
            raise DuplicateResourceError(detail=f'Stock-in batch {batch_no} already exists.')

        try:
            with transaction.atomic():
                record = StockInRecord.objects.create(
                    batch_no=batch_no,
                    type=type,
                    supplier=supplier,
                    in_date=in_date or timezone.localdate(),
                    notes=notes,
                    operator=operator,
                )
        except IntegrityError:
            raise DuplicateResourceError(detail=f'Stock-in batch {batch_no} already exists.')

        unit_count = 0
        for item in items:
            line = StockInItem.objects.create(
                record=record,
                asset=None,
                quantity=item['quantity'],
                unit_price=item['unit_price'],
            )
            units = Asset.objects.bulk_create([
                Asset(
                    name=item['name'],
                    type=item['type'],
                    department=item['department'],
                    description=item.get('description') or '',
                    status=Asset.StatusChoices.IN_STOCK,
                    created_by=operator,
                )
                for _ in range(int(item['quantity']))
            ])
            line.asset = units[0]
            line.save(update_fields=['asset'])
            unit_count += len(units)

        logger.info(
            'Stock-in %s: %d lines, %d assets created by %s',
            batch_no, len(items), unit_count, getattr(operator, 'username', None),
        )
        return record


class StockOutService:
    """Outgoing batches: link existing in_stock assets to a recipient."""

    @staticmethod
    def _raise_unavailable(asset_id) -> None:
        asset = Asset.objects.filter(pk=asset_id).only('status', 'code').first()
        if asset is None:
            raise ResourceNotFoundError(detail=f'Asset {asset_id} not found.')
        raise InvalidStateTransition(
            detail=f'Asset {asset.code or asset_id} is {asset.status}; only in_stock assets can be stocked out.',
        )

    @staticmethod
    def _validate_assets(assets: list[dict]) -> None:
        if not assets:
            raise BusinessRuleViolation(detail='At least one asset is required.')

        ids = []
        for entry in assets:
            try:
                ids.append(uuid.UUID(str(entry['id'])))
            except ValueError:
                raise ResourceNotFoundError(detail=f'Asset {entry["id"]} not found.')
        if len(set(ids)) != len(ids):
            raise BusinessRuleViolation(detail='An asset may appear only once per batch.')

        codes = [entry['code'] for entry in assets if entry.get('code')]
        if len(set(codes)) != len(codes):
            raise ConflictError(detail='Asset codes must be unique within a batch.')
        for entry in assets:
            code = entry.get('code')
            if code and Asset.objects.filter(code=code).exclude(pk=entry['id']).exists():
                raise ConflictError(detail=f'Asset code {code} is already in use.')

    @classmethod
    @transaction.atomic
    def create_stock_out(
        cls,
        *,
        assets: list[dict],
        recipient: str,
        department: str,
        batch_no: str | None = None,
        out_date: date | None = None,
        notes: str = '',
        operator=None,
    ) -> StockOutRecord:
        """
        Record an outgoing batch. Every listed asset must be in_stock;
        each becomes in_use with its department set to ``department``
        and a code assigned when it has none.
        """
        cls._validate_assets(assets)

        batch_no = batch_no or generate_batch_no(STOCK_OUT_BATCH_PREFIX)
        if StockOutRecord.objects.filter(batch_no=batch_no).exists():
            raise DuplicateResourceError(detail=f'Stock-out batch {batch_no} already exists.')

        try:
            with transaction.atomic():
                record = StockOutRecord.objects.create(
                    batch_no=batch_no,
                    recipient=recipient,
                    department=department,
                    out_date=out_date or timezone.localdate(),
                    notes=notes,
                    operator=operator,
                )
                for entry in assets:
                    claimed = Asset.objects.claim_for_stock_out(
                        asset_id=entry['id'],
                        record=record,
                        department=department,
                        code=entry.get('code') or generate_asset_code(entry['id']),
                    )
                    if not claimed:
                        cls._raise_unavailable(entry['id'])
                    StockOutItem.objects.create(record=record, asset_id=entry['id'])
        except IntegrityError:
            raise DuplicateResourceError(
                detail=f'Stock-out batch {batch_no} or one of its asset codes already exists.',
            )

        logger.info(
            'Stock-out %s: %d assets to %s (%s) by %s',
            batch_no, len(assets), recipient, department, getattr(operator, 'username', None),
        )
        return record
