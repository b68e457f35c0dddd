"""
Users — Service Layer Tests

Tests for UserService business logic, including the last-admin rule.

@file users/tests/test_services.py
"""

import pytest

from core.exceptions import BusinessRuleViolation, DuplicateResourceError, ResourceNotFoundError
from tests.factories import AdminUserFactory, UserFactory
from users.models import User
from users.services import UserService


@pytest.mark.django_db
class TestUserService:
    def test_create_user(self):
        user = UserService.create_user(username='carol', password='Secret123', name='Carol')
        assert user.pk is not None
        assert user.check_password('Secret123')
        assert user.name == 'Carol'

    def test_create_user_duplicate_username(self):
        UserFactory(username='dave')
        with pytest.raises(DuplicateResourceError):
            UserService.create_user(username='dave', password='Secret123')

    def test_update_user(self):
        user = UserFactory()
        updated = UserService.update_user(username=user.username, name='Updated', branch='HQ')
        assert updated.name == 'Updated'
        assert updated.branch == 'HQ'

    def test_update_password(self):
        user = UserFactory()
        UserService.update_user(username=user.username, password='NewPass123')
        user.refresh_from_db()
        assert user.check_password('NewPass123')

    def test_update_nonexistent_user(self):
        with pytest.raises(ResourceNotFoundError):
            UserService.update_user(username='ghost', name='Nope')

    def test_cannot_demote_last_admin(self):
        admin = AdminUserFactory()
        with pytest.raises(BusinessRuleViolation):
            UserService.update_user(username=admin.username, role=User.RoleChoices.USER)
        admin.refresh_from_db()
        assert admin.is_admin

    def test_can_demote_admin_when_another_exists(self):
        admin = AdminUserFactory()
        AdminUserFactory()
        updated = UserService.update_user(username=admin.username, role=User.RoleChoices.USER)
        assert updated.role == User.RoleChoices.USER

    def test_inactive_admin_does_not_count_for_demotion(self):
        admin = AdminUserFactory()
        AdminUserFactory(is_active=False)
        with pytest.raises(BusinessRuleViolation):
            UserService.update_user(username=admin.username, role=User.RoleChoices.USER)

    def test_cannot_deactivate_last_active_admin(self):
        admin = AdminUserFactory()
        AdminUserFactory(is_active=False)
        with pytest.raises(BusinessRuleViolation):
            UserService.update_user(username=admin.username, is_active=False)
        admin.refresh_from_db()
        assert admin.is_active

    def test_can_deactivate_admin_when_another_is_active(self):
        admin = AdminUserFactory()
        AdminUserFactory()
        updated = UserService.update_user(username=admin.username, is_active=False)
        assert updated.is_active is False
        assert User.objects.active_admins().count() == 1


@pytest.mark.django_db
class TestDeleteUser:
    def test_delete_regular_user(self):
        AdminUserFactory()
        user = UserFactory()
        UserService.delete_user(username=user.username)
        assert not User.objects.filter(pk=user.pk).exists()

    def test_delete_last_admin_rejected(self):
        admin = AdminUserFactory()
        with pytest.raises(BusinessRuleViolation):
            UserService.delete_user(username=admin.username)
        assert User.objects.filter(pk=admin.pk).exists()

    def test_delete_non_last_admin_succeeds(self):
        first = AdminUserFactory()
        AdminUserFactory()
        UserService.delete_user(username=first.username)
        assert User.objects.admins().count() == 1

    def test_delete_nonexistent_user(self):
        with pytest.raises(ResourceNotFoundError):
            UserService.delete_user(username='ghost')

    def test_delete_last_active_admin_rejected_when_only_inactive_remain(self):
        admin = AdminUserFactory()
        AdminUserFactory(is_active=False)
        with pytest.raises(BusinessRuleViolation):
            UserService.delete_user(username=admin.username)
        assert User.objects.active_admins().filter(pk=admin.pk).exists()

    def test_delete_inactive_admin_allowed(self):
        AdminUserFactory()
        dormant = AdminUserFactory(is_active=False)
        UserService.delete_user(username=dormant.username)
        assert User.objects.active_admins().count() == 1
