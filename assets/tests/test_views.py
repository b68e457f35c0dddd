"""
Assets — API Integration Tests

Registry endpoints, lifecycle actions, the Operation Log, QR labels
and the type catalog.

@file assets/tests/test_views.py
"""

import pytest
from django.urls import reverse
from rest_framework import status

from assets.models import Asset, AssetOperation, AssetType
from tests.factories import AssetFactory, AssetOperationFactory, AssetTypeFactory


def _assign(client, asset, **payload):
    return client.post(
        reverse('api:assets:asset-assign', args=[asset.pk]),
        {'recipient': 'Alice', 'department': 'Sales', **payload},
        format='json',
    )


@pytest.mark.django_db
class TestAssetRegistry:

    def test_create_and_retrieve(self, authenticated_client):
        resp = authenticated_client.post(
            reverse('api:assets:asset-list'),
            {'name': 'Laptop', 'type': 'computer', 'department': 'Eng'},
            format='json',
        )
        assert resp.status_code == status.HTTP_201_CREATED
        asset_id = resp.json()['data']['id']
        assert resp.json()['data']['status'] == 'in_stock'

        detail = authenticated_client.get(reverse('api:assets:asset-detail', args=[asset_id]))
        assert detail.status_code == status.HTTP_200_OK
        assert detail.json()['data']['name'] == 'Laptop'

    def test_create_requires_name(self, authenticated_client):
        resp = authenticated_client.post(
            reverse('api:assets:asset-list'), {'type': 'computer'}, format='json',
        )
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()['code'] == 'VALIDATION_ERROR'

    def test_update_changes_description_only(self, authenticated_client):
        asset = AssetFactory(name='Phone')
        resp = authenticated_client.put(
            reverse('api:assets:asset-detail', args=[asset.pk]),
            {'description': 'new case', 'name': 'ignored'},
            format='json',
        )
        assert resp.status_code == status.HTTP_200_OK
        asset.refresh_from_db()
        assert asset.description == 'new case'
        assert asset.name == 'Phone'

    def test_list_pagination_envelope(self, authenticated_client):
        AssetFactory.create_batch(12)
        resp = authenticated_client.get(reverse('api:assets:asset-list'), {'pageSize': 5})
        body = resp.json()
        assert body['success'] is True
        assert body['total'] == 12
        assert len(body['data']) == 5

    def test_filters(self, authenticated_client):
        AssetFactory(name='Dell Laptop', type='computer', code='DL-1')
        AssetFactory(name='HP Printer', type='printer')
        AssetFactory(name='Old Laptop', type='computer', status=Asset.StatusChoices.SCRAPPED)
        url = reverse('api:assets:asset-list')

        assert authenticated_client.get(url, {'type': 'computer'}).json()['total'] == 2
        assert authenticated_client.get(url, {'keyword': 'laptop'}).json()['total'] == 2
        assert authenticated_client.get(url, {'keyword': 'DL-'}).json()['total'] == 1
        assert authenticated_client.get(
            url, {'type': 'computer', 'status': 'in_stock'},
        ).json()['total'] == 1

    def test_by_code(self, authenticated_client):
        asset = AssetFactory(code='PC-77')
        resp = authenticated_client.get(reverse('api:assets:asset-by-code', kwargs={'code': 'PC-77'}))
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()['data']['id'] == str(asset.pk)

    def test_by_code_missing(self, authenticated_client):
        resp = authenticated_client.get(reverse('api:assets:asset-by-code', kwargs={'code': 'NOPE'}))
        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.json()['code'] == 'RESOURCE_NOT_FOUND'

    def test_qrcode_png(self, authenticated_client):
        asset = AssetFactory(code='QR-9')
        resp = authenticated_client.get(reverse('api:assets:asset-qrcode', args=[asset.pk]))
        assert resp.status_code == status.HTTP_200_OK
        assert resp['Content-Type'] == 'image/png'
        assert resp.content.startswith(b'\x89PNG')

    def test_delete_forbidden_for_regular_user(self, authenticated_client):
        asset = AssetFactory()
        resp = authenticated_client.delete(reverse('api:assets:asset-detail', args=[asset.pk]))
        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert Asset.objects.filter(pk=asset.pk).exists()

    def test_delete_as_admin(self, admin_client):
        asset = AssetFactory()
        resp = admin_client.delete(reverse('api:assets:asset-detail', args=[asset.pk]))
        assert resp.status_code == status.HTTP_200_OK
        assert not Asset.objects.filter(pk=asset.pk).exists()


@pytest.mark.django_db
class TestLifecycleEndpoints:

    def test_assign_sets_in_use_and_department(self, authenticated_client):
        asset = AssetFactory(department='Eng')
        resp = _assign(authenticated_client, asset)
        assert resp.status_code == status.HTTP_200_OK
        data = resp.json()['data']
        assert data['status'] == 'in_use'
        assert data['department'] == 'Sales'
        assert data['recipient'] == 'Alice'
        assert data['code']

    def test_second_assign_rejected(self, authenticated_client):
        asset = AssetFactory()
        _assign(authenticated_client, asset)
        resp = _assign(authenticated_client, asset, recipient='Bob', department='Ops')
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()['success'] is False

        asset.refresh_from_db()
        assert asset.department == 'Sales'

    def test_stock_in_then_assign_scenario(self, authenticated_client):
        authenticated_client.post(
            reverse('api:stock_in:stock-in-list'),
            {'items': [{'name': 'Laptop', 'type': 'computer', 'department': 'Eng',
                        'quantity': 2, 'unit_price': 1000}]},
            format='json',
        )
        url = reverse('api:assets:asset-list')
        eng = authenticated_client.get(url, {'department': 'Eng'}).json()
        assert eng['total'] == 2

        asset = Asset.objects.get(pk=eng['data'][0]['id'])
        assert _assign(authenticated_client, asset).status_code == status.HTTP_200_OK

        sales = authenticated_client.get(url, {'department': 'Sales'}).json()
        assert sales['total'] == 1
        assert sales['data'][0]['status'] == 'in_use'

    def test_return_then_operation_log(self, authenticated_client):
        asset = AssetFactory()
        _assign(authenticated_client, asset)
        resp = authenticated_client.post(
            reverse('api:assets:asset-return', args=[asset.pk]), {'notes': 'back'}, format='json',
        )
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()['data']['status'] == 'in_stock'
        assert resp.json()['data']['last_stock_out'] is None

        ops = authenticated_client.get(reverse('api:assets:asset-operations', args=[asset.pk]))
        assert [op['operation_type'] for op in ops.json()['data']] == ['return']

    def test_return_in_stock_rejected(self, authenticated_client):
        asset = AssetFactory()
        resp = authenticated_client.post(reverse('api:assets:asset-return', args=[asset.pk]))
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.json()['code'] == 'INVALID_STATE_TRANSITION'

    def test_scrap(self, authenticated_client):
        asset = AssetFactory()
        resp = authenticated_client.post(reverse('api:assets:asset-scrap', args=[asset.pk]))
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()['data']['status'] == 'scrapped'

    def test_operation_log_filtered_by_type(self, authenticated_client):
        AssetOperationFactory(operation_type=AssetOperation.OperationType.RETURN)
        AssetOperationFactory(operation_type=AssetOperation.OperationType.SCRAP)
        resp = authenticated_client.get(reverse('api:assets:asset-operation-log'), {'type': 'scrap'})
        body = resp.json()
        assert body['total'] == 1
        assert body['data'][0]['operation_type'] == 'scrap'


@pytest.mark.django_db
class TestAssetTypeEndpoints:

    def test_list_open_to_users(self, authenticated_client):
        AssetTypeFactory(code='computer')
        resp = authenticated_client.get(reverse('api:asset_types:asset-type-list'))
        assert resp.status_code == status.HTTP_200_OK
        assert [row['code'] for row in resp.json()['data']] == ['computer']

    def test_create_requires_admin(self, authenticated_client):
        resp = authenticated_client.post(
            reverse('api:asset_types:asset-type-list'), {'code': 'x', 'name': 'X'}, format='json',
        )
        assert resp.status_code == status.HTTP_403_FORBIDDEN

    def test_admin_create_and_duplicate(self, admin_client):
        url = reverse('api:asset_types:asset-type-list')
        first = admin_client.post(url, {'code': 'laptop', 'name': 'Laptop'}, format='json')
        again = admin_client.post(url, {'code': 'laptop', 'name': 'Laptop'}, format='json')
        assert first.status_code == status.HTTP_201_CREATED
        assert again.status_code == status.HTTP_400_BAD_REQUEST
        assert again.json()['code'] == 'DUPLICATE_RESOURCE'

    def test_delete_in_use_type_rejected(self, admin_client):
        asset_type = AssetTypeFactory(code='monitor')
        AssetFactory(type='monitor')
        resp = admin_client.delete(reverse('api:asset_types:asset-type-detail', args=[asset_type.pk]))
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert AssetType.objects.filter(pk=asset_type.pk).exists()
