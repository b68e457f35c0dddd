"""
Backups — API Integration Tests

The store is swapped for one bound to a temporary file so no test
touches the real database.

@file backups/tests/test_views.py
"""

import sqlite3
from contextlib import closing
from unittest import mock

import pytest
from django.urls import reverse
from rest_framework import status

from backups.store import BackupStore


class FakeConnections:
    def close_all(self):
        pass


@pytest.fixture
def temp_store(tmp_path):
    db_file = tmp_path / 'live.sqlite3'
    with closing(sqlite3.connect(db_file)) as conn:
        conn.execute('CREATE TABLE meta (version TEXT)')
        conn.commit()
    store = BackupStore(
        db_path=db_file, backup_dir=tmp_path / 'backups', connections=FakeConnections(), max_backups=10,
    )
    with mock.patch('backups.views.get_backup_store', return_value=store):
        yield store


@pytest.mark.django_db
class TestBackupEndpoints:

    def test_regular_user_forbidden(self, authenticated_client, temp_store):
        resp = authenticated_client.get(reverse('api:backups:backup-list'))
        assert resp.status_code == status.HTTP_403_FORBIDDEN

    def test_create_then_list(self, admin_client, temp_store):
        created = admin_client.post(reverse('api:backups:backup-list'))
        assert created.status_code == status.HTTP_201_CREATED
        name = created.json()['data']['name']

        listed = admin_client.get(reverse('api:backups:backup-list'))
        assert [b['name'] for b in listed.json()['data']] == [name]

    def test_restore(self, admin_client, temp_store):
        name = temp_store.create()['name']
        resp = admin_client.post(reverse('api:backups:backup-restore', args=[name]))
        assert resp.status_code == status.HTTP_200_OK
        assert resp.json()['success'] is True

    def test_restore_unknown_404(self, admin_client, temp_store):
        resp = admin_client.post(
            reverse('api:backups:backup-restore', args=['backup-19990101T000000000000Z.sqlite3']),
        )
        assert resp.status_code == status.HTTP_404_NOT_FOUND

    def test_restore_bad_name_400(self, admin_client, temp_store):
        resp = admin_client.post(reverse('api:backups:backup-restore', args=['passwd']))
        assert resp.status_code == status.HTTP_400_BAD_REQUEST
