"""
Assets — Service Layer

Registry CRUD and the lifecycle transitions (assign, return, scrap).
No HTTP context: services receive plain Python arguments and raise
typed exceptions.

Return and scrap commit the status change first; the Operation Log
row is then written best-effort. A failed log write is logged as a
warning and does not undo the transition.

@file assets/services.py
"""

import io
import json
import logging
from datetime import date

import qrcode
from django.db import DatabaseError, transaction

from core.exceptions import (
    BusinessRuleViolation,
    DuplicateResourceError,
    InvalidStateTransition,
    ResourceNotFoundError,
)
from stock.models import StockOutRecord
from stock.services import StockOutService

from .models import Asset, AssetOperation, AssetType

logger = logging.getLogger('assettrack')


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class AssetService:
    """Asset registry: create, read, describe, delete."""

    @staticmethod
    def get_by_id(asset_id) -> Asset:
        try:
            return Asset.objects.select_related('last_stock_out').get(pk=asset_id)
        except Asset.DoesNotExist:
            raise ResourceNotFoundError(detail=f'Asset {asset_id} not found.')

    @staticmethod
    def get_by_code(code: str) -> Asset:
        try:
            return Asset.objects.select_related('last_stock_out').get(code=code)
        except Asset.DoesNotExist:
            raise ResourceNotFoundError(detail=f'Asset {code} not found.')

    @staticmethod
    @transaction.atomic
    def create_asset(
        *,
        name: str,
        type: str,
        department: str | None = None,
        description: str = '',
        actor=None,
    ) -> Asset:
        asset = Asset.objects.create(
            name=name,
            type=type,
            department=department,
            description=description,
            status=Asset.StatusChoices.IN_STOCK,
            created_by=actor,
        )
        logger.info('Asset %s (%s) created by %s', asset.pk, name, getattr(actor, 'username', None))
        return asset

    @staticmethod
    @transaction.atomic
    def update_description(*, asset_id, description: str, actor=None) -> Asset:
        updated = Asset.objects.filter(pk=asset_id).update(description=description)
        if not updated:
            raise ResourceNotFoundError(detail=f'Asset {asset_id} not found.')
        return AssetService.get_by_id(asset_id)

    @staticmethod
    @transaction.atomic
    def delete_asset(*, asset_id, actor=None) -> None:
        """Administrative hard delete; bypasses lifecycle rules."""
        deleted, _ = Asset.objects.filter(pk=asset_id).delete()
        if not deleted:
            raise ResourceNotFoundError(detail=f'Asset {asset_id} not found.')
        logger.warning('Asset %s hard-deleted by %s', asset_id, getattr(actor, 'username', None))

    @staticmethod
    def render_qr_png(asset: Asset) -> bytes:
        """PNG label encoding the asset's identity for scanning."""
        payload = json.dumps({
            'id': str(asset.pk),
            'code': asset.code,
            'name': asset.name,
            'type': asset.type,
        })
        img = qrcode.make(payload)
        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class LifecycleService:
    """
    State machine:  in_stock → in_use → {in_stock, scrapped}

    Every transition is a conditional update; a zero row count means
    the asset is missing (404) or in the wrong state (400).
    """

    @staticmethod
    def _raise_for(asset_id, action: str) -> None:
        asset = Asset.objects.filter(pk=asset_id).only('status', 'code').first()
        if asset is None:
            raise ResourceNotFoundError(detail=f'Asset {asset_id} not found.')
        raise InvalidStateTransition(
            detail=f'Cannot {action} asset {asset.code or asset_id}: status is {asset.status}.',
        )

    @staticmethod
    def _record_operation(*, asset_id, operation_type: str, operator, notes: str) -> AssetOperation | None:
        try:
            with transaction.atomic():
                return AssetOperation.objects.create(
                    asset_id=asset_id,
                    operation_type=operation_type,
                    operator=operator,
                    notes=notes,
                )
        except DatabaseError:
            logger.warning(
                'Operation log write failed for asset %s (%s); status change kept.',
                asset_id, operation_type, exc_info=True,
            )
            return None

    @staticmethod
    def assign(
        *,
        asset_id,
        recipient: str,
        department: str,
        out_date: date | None = None,
        code: str | None = None,
        notes: str = '',
        operator=None,
    ) -> StockOutRecord:
        """Single-asset stock-out under a generated OUT-<timestamp> batch."""
        return StockOutService.create_stock_out(
            assets=[{'id': asset_id, 'code': code}],
            recipient=recipient,
            department=department,
            out_date=out_date,
            notes=notes,
            operator=operator,
        )

    @classmethod
    def return_asset(cls, *, asset_id, notes: str = '', operator=None) -> Asset:
        with transaction.atomic():
            if not Asset.objects.release(asset_id=asset_id):
                cls._raise_for(asset_id, 'return')

        cls._record_operation(
            asset_id=asset_id,
            operation_type=AssetOperation.OperationType.RETURN,
            operator=operator,
            notes=notes,
        )
        logger.info('Asset %s returned by %s', asset_id, getattr(operator, 'username', None))
        return AssetService.get_by_id(asset_id)

    @classmethod
    def scrap_asset(cls, *, asset_id, notes: str = '', operator=None) -> Asset:
        with transaction.atomic():
            if not Asset.objects.retire(asset_id=asset_id):
                cls._raise_for(asset_id, 'scrap')

        cls._record_operation(
            asset_id=asset_id,
            operation_type=AssetOperation.OperationType.SCRAP,
            operator=operator,
            notes=notes,
        )
        logger.info('Asset %s scrapped by %s', asset_id, getattr(operator, 'username', None))
        return AssetService.get_by_id(asset_id)


# ---------------------------------------------------------------------------
# Type catalog
# ---------------------------------------------------------------------------

class AssetTypeService:
    """Admin-managed type catalog. ``code`` is immutable once created."""

    UPDATABLE_FIELDS = ('name', 'description', 'low_stock_threshold')

    @staticmethod
    @transaction.atomic
    def create_type(*, code: str, name: str, actor=None, **fields) -> AssetType:
        if AssetType.objects.filter(code=code).exists():
            raise DuplicateResourceError(detail=f'Asset type {code} already exists.')
        asset_type = AssetType.objects.create(code=code, name=name, **fields)
        logger.info('Asset type %s created by %s', code, getattr(actor, 'username', None))
        return asset_type

    @classmethod
    @transaction.atomic
    def update_type(cls, *, type_id, actor=None, **fields) -> AssetType:
        try:
            asset_type = AssetType.objects.select_for_update().get(pk=type_id)
        except AssetType.DoesNotExist:
            raise ResourceNotFoundError(detail=f'Asset type {type_id} not found.')

        for field, value in fields.items():
            if field in cls.UPDATABLE_FIELDS:
                setattr(asset_type, field, value)
        asset_type.save()
        return asset_type

    @staticmethod
    @transaction.atomic
    def delete_type(*, type_id, actor=None) -> None:
        try:
            asset_type = AssetType.objects.select_for_update().get(pk=type_id)
        except AssetType.DoesNotExist:
            raise ResourceNotFoundError(detail=f'Asset type {type_id} not found.')

        in_use = Asset.objects.filter(type=asset_type.code).count()
        if in_use:
            raise BusinessRuleViolation(
                detail=f'Asset type {asset_type.code} is used by {in_use} assets and cannot be deleted.',
            )
        asset_type.delete()
        logger.info('Asset type %s deleted by %s', asset_type.code, getattr(actor, 'username', None))
