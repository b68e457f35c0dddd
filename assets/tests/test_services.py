"""
Tests — AssetService, LifecycleService and AssetTypeService.

@file assets/tests/test_services.py
"""

import uuid
from unittest import mock

import pytest
from django.db import DatabaseError

from assets.models import Asset, AssetOperation
from assets.services import AssetService, AssetTypeService, LifecycleService
from core.exceptions import (
    BusinessRuleViolation,
    DuplicateResourceError,
    InvalidStateTransition,
    ResourceNotFoundError,
)
from tests.factories import AssetFactory, AssetTypeFactory, UserFactory


pytestmark = pytest.mark.django_db


class TestAssetService:

    def test_create_asset_starts_in_stock(self):
        user = UserFactory()
        asset = AssetService.create_asset(name='Monitor', type='display', department='Eng', actor=user)
        assert asset.status == Asset.StatusChoices.IN_STOCK
        assert asset.code is None
        assert asset.created_by == user

    def test_update_description_only(self):
        asset = AssetFactory(name='Phone')
        updated = AssetService.update_description(asset_id=asset.pk, description='cracked screen')
        assert updated.description == 'cracked screen'
        assert updated.name == 'Phone'

    def test_get_by_code(self):
        asset = AssetFactory(code='PC-9')
        assert AssetService.get_by_code('PC-9').pk == asset.pk
        with pytest.raises(ResourceNotFoundError):
            AssetService.get_by_code('missing')

    def test_delete_asset(self):
        asset = AssetFactory()
        AssetService.delete_asset(asset_id=asset.pk)
        assert not Asset.objects.filter(pk=asset.pk).exists()
        with pytest.raises(ResourceNotFoundError):
            AssetService.delete_asset(asset_id=asset.pk)

    def test_qr_png(self):
        png = AssetService.render_qr_png(AssetFactory(code='QR-1'))
        assert png.startswith(b'\x89PNG')


class TestLifecycle:

    def test_assign_then_return(self):
        asset = AssetFactory()
        record = LifecycleService.assign(asset_id=asset.pk, recipient='Alice', department='Sales')
        asset.refresh_from_db()
        assert asset.status == Asset.StatusChoices.IN_USE
        assert asset.department == 'Sales'
        assert asset.last_stock_out_id == record.pk

        returned = LifecycleService.return_asset(asset_id=asset.pk, notes='done')
        assert returned.status == Asset.StatusChoices.IN_STOCK
        assert returned.last_stock_out is None
        assert AssetOperation.objects.filter(
            asset=asset, operation_type=AssetOperation.OperationType.RETURN,
        ).count() == 1

    def test_assign_in_use_conflicts_and_leaves_fields(self):
        asset = AssetFactory()
        first = LifecycleService.assign(asset_id=asset.pk, recipient='Alice', department='Sales')
        asset.refresh_from_db()
        before = (asset.status, asset.department, asset.code, asset.last_stock_out_id)

        with pytest.raises(InvalidStateTransition):
            LifecycleService.assign(asset_id=asset.pk, recipient='Bob', department='Ops', code='OTHER')

        asset.refresh_from_db()
        assert (asset.status, asset.department, asset.code, asset.last_stock_out_id) == before
        assert asset.last_stock_out_id == first.pk

    def test_assign_unknown_asset(self):
        with pytest.raises(ResourceNotFoundError):
            LifecycleService.assign(asset_id=uuid.uuid4(), recipient='Alice', department='Sales')

    def test_return_requires_in_use(self):
        asset = AssetFactory()
        with pytest.raises(InvalidStateTransition):
            LifecycleService.return_asset(asset_id=asset.pk)
        assert not AssetOperation.objects.exists()

    def test_scrap_from_in_stock(self):
        asset = AssetFactory()
        scrapped = LifecycleService.scrap_asset(asset_id=asset.pk, notes='broken')
        assert scrapped.status == Asset.StatusChoices.SCRAPPED
        assert AssetOperation.objects.get(asset=asset).operation_type == 'scrap'

    def test_scrap_from_in_use_clears_stock_out(self):
        asset = AssetFactory()
        LifecycleService.assign(asset_id=asset.pk, recipient='Alice', department='Sales')
        scrapped = LifecycleService.scrap_asset(asset_id=asset.pk)
        assert scrapped.last_stock_out is None

    def test_scrapped_is_terminal(self):
        asset = AssetFactory(status=Asset.StatusChoices.SCRAPPED)
        with pytest.raises(InvalidStateTransition):
            LifecycleService.scrap_asset(asset_id=asset.pk)
        with pytest.raises(InvalidStateTransition):
            LifecycleService.assign(asset_id=asset.pk, recipient='Alice', department='Sales')

    def test_failed_log_write_keeps_status(self):
        asset = AssetFactory(status=Asset.StatusChoices.IN_USE)
        with mock.patch.object(
            AssetOperation.objects, 'create', side_effect=DatabaseError('disk full'),
        ):
            returned = LifecycleService.return_asset(asset_id=asset.pk)

        assert returned.status == Asset.StatusChoices.IN_STOCK
        assert not AssetOperation.objects.exists()


class TestAssetTypeService:

    def test_create_duplicate_code(self):
        AssetTypeService.create_type(code='laptop', name='Laptop')
        with pytest.raises(DuplicateResourceError):
            AssetTypeService.create_type(code='laptop', name='Other')

    def test_update_keeps_code(self):
        asset_type = AssetTypeFactory(code='phone')
        updated = AssetTypeService.update_type(
            type_id=asset_type.pk, name='Mobile', low_stock_threshold=3, code='hacked',
        )
        assert updated.name == 'Mobile'
        assert updated.low_stock_threshold == 3
        assert updated.code == 'phone'

    def test_delete_type_in_use_rejected(self):
        asset_type = AssetTypeFactory(code='printer')
        AssetFactory(type='printer')
        with pytest.raises(BusinessRuleViolation):
            AssetTypeService.delete_type(type_id=asset_type.pk)

    def test_delete_unused_type(self):
        asset_type = AssetTypeFactory(code='tablet')
        AssetTypeService.delete_type(type_id=asset_type.pk)
        with pytest.raises(ResourceNotFoundError):
            AssetTypeService.delete_type(type_id=asset_type.pk)
