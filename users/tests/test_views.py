"""
Users — API Integration Tests

End-to-end tests for auth endpoints and user CRUD.

@file users/tests/test_views.py
"""

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from tests.factories import AdminUserFactory, UserFactory
from users.models import User


@pytest.mark.django_db
class TestLoginEndpoint:
    def test_login_success(self, api_client):
        UserFactory(username='erin', password='Login2026!!', role='user', branch='Paris')
        response = api_client.post(
            reverse('api:auth:login'),
            {'username': 'erin', 'password': 'Login2026!!'},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data['success'] is True
        assert data['data']['user']['username'] == 'erin'

        claims = AccessToken(data['data']['token'])
        assert claims['username'] == 'erin'
        assert claims['role'] == 'user'
        assert claims['branch'] == 'Paris'

    def test_login_wrong_password(self, api_client):
        UserFactory(username='frank', password='Login2026!!')
        response = api_client.post(
            reverse('api:auth:login'),
            {'username': 'frank', 'password': 'wrong'},
            format='json',
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['success'] is False

    def test_login_unknown_user(self, api_client):
        response = api_client.post(
            reverse('api:auth:login'),
            {'username': 'nobody', 'password': 'whatever'},
            format='json',
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_missing_fields(self, api_client):
        response = api_client.post(reverse('api:auth:login'), {}, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_bearer_token_grants_access(self, api_client):
        UserFactory(username='gina', password='Login2026!!')
        login = api_client.post(
            reverse('api:auth:login'),
            {'username': 'gina', 'password': 'Login2026!!'},
            format='json',
        )
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.json()['data']['token']}")
        response = api_client.get(reverse('api:auth:me'))
        assert response.status_code == status.HTTP_200_OK

    def test_invalid_bearer_token_rejected(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
        response = api_client.get(reverse('api:auth:me'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestMeEndpoint:
    def test_me_authenticated(self, authenticated_client, user):
        response = authenticated_client.get(reverse('api:auth:me'))
        assert response.status_code == status.HTTP_200_OK
        assert response.json()['data']['username'] == user.username

    def test_me_unauthenticated(self, api_client):
        response = api_client.get(reverse('api:auth:me'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestUserCRUD:
    def test_list_users_as_admin(self, admin_client):
        UserFactory.create_batch(2)
        response = admin_client.get(reverse('api:users:user-list'))
        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_list_users_forbidden_for_regular_user(self, authenticated_client):
        response = authenticated_client.get(reverse('api:users:user-list'))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_user(self, admin_client):
        response = admin_client.post(
            reverse('api:users:user-list'),
            {'username': 'henry', 'password': 'Secret123', 'name': 'Henry', 'role': 'user'},
            format='json',
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.filter(username='henry').exists()
        assert 'password' not in response.json()['data']

    def test_create_duplicate_username(self, admin_client):
        UserFactory(username='ivy')
        response = admin_client.post(
            reverse('api:users:user-list'),
            {'username': 'ivy', 'password': 'Secret123'},
            format='json',
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['code'] == 'DUPLICATE_RESOURCE'

    def test_update_by_username(self, admin_client):
        user = UserFactory(username='jack')
        response = admin_client.patch(
            reverse('api:users:user-detail', args=['jack']),
            {'name': 'Jack R.'},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.name == 'Jack R.'

    def test_delete_last_admin_returns_400(self, admin_client, admin_user):
        response = admin_client.delete(reverse('api:users:user-detail', args=[admin_user.username]))
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(pk=admin_user.pk).exists()

    def test_delete_non_last_admin(self, admin_client):
        other = AdminUserFactory()
        response = admin_client.delete(reverse('api:users:user-detail', args=[other.username]))
        assert response.status_code == status.HTTP_200_OK
        assert not User.objects.filter(pk=other.pk).exists()

    def test_delete_unknown_user_404(self, admin_client):
        response = admin_client.delete(reverse('api:users:user-detail', args=['ghost']))
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestSeedAdminCommand:
    def test_creates_admin_once(self):
        from django.core.management import call_command

        call_command('seed_admin', username='boss', password='Secret123')
        call_command('seed_admin', username='boss', password='Other123')
        boss = User.objects.get(username='boss')
        assert boss.is_admin
        assert boss.check_password('Secret123')
