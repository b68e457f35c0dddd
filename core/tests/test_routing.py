"""
Core — Routing Tests

Documented API paths resolve with and without a trailing slash, so a
POST is never turned into a body-dropping redirect.

@file core/tests/test_routing.py
"""

import pytest
from django.urls import resolve
from rest_framework import status

from assets.models import Asset
from tests.factories import AssetFactory, UserFactory


@pytest.mark.parametrize('path', [
    '/api/auth/login',
    '/api/auth/me',
    '/api/assets',
    '/api/assets/3f2b8c1e-0d4a-4c6e-9a57-1b2c3d4e5f60/assign',
    '/api/asset-types',
    '/api/stock-in',
    '/api/stock-out',
    '/api/dashboard',
    '/api/reports/statistics',
    '/api/backup',
    '/api/backup/backup-20260101T000000000000Z.sqlite3/restore',
    '/api/notifications/read-all',
    '/api/users',
])
def test_paths_resolve_without_and_with_slash(path):
    assert resolve(path).func is not None
    assert resolve(path + '/').func is not None


@pytest.mark.django_db
class TestSlashlessRequests:

    def test_login_without_trailing_slash(self, api_client):
        UserFactory(username='hana', password='Login2026!!')
        resp = api_client.post(
            '/api/auth/login', {'username': 'hana', 'password': 'Login2026!!'}, format='json',
        )
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()['data']['user']['username'] == 'hana'

    def test_assign_without_trailing_slash(self, authenticated_client):
        asset = AssetFactory()
        resp = authenticated_client.post(
            f'/api/assets/{asset.pk}/assign',
            {'recipient': 'Alice', 'department': 'Sales'},
            format='json',
        )
        assert resp.status_code == status.HTTP_200_OK
        asset.refresh_from_db()
        assert asset.status == Asset.StatusChoices.IN_USE

    def test_stock_in_without_trailing_slash(self, authenticated_client):
        resp = authenticated_client.post(
            '/api/stock-in',
            {'items': [{'name': 'Mouse', 'type': 'peripheral', 'department': 'Ops',
                        'quantity': 1, 'unit_price': 10}]},
            format='json',
        )
        assert resp.status_code == status.HTTP_201_CREATED

    def test_malformed_asset_id_is_not_found(self, authenticated_client):
        resp = authenticated_client.post(
            '/api/assets/0123456789abcdef0123456789abcdef0/assign/',
            {'recipient': 'Alice', 'department': 'Sales'},
            format='json',
        )
        assert resp.status_code == status.HTTP_404_NOT_FOUND
