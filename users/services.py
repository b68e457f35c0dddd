"""
Users — Service Layer

All user-related business logic. No HTTP context: services receive
plain Python arguments and raise typed exceptions.

@file users/services.py
"""

import logging

from django.db import transaction

from core.exceptions import BusinessRuleViolation, DuplicateResourceError, ResourceNotFoundError

from .models import User

logger = logging.getLogger('assettrack')


class UserService:
    """CRUD for User accounts, guarding the last-admin invariant."""

    UPDATABLE_FIELDS = ('name', 'role', 'branch', 'is_active')

    @staticmethod
    def _get_for_update(username: str) -> User:
        try:
            return User.objects.select_for_update().get(username=username)
        except User.DoesNotExist:
            raise ResourceNotFoundError(detail=f'User {username} not found.')

    @staticmethod
    def _is_last_admin(user: User) -> bool:
        """True when ``user`` is the only active admin left."""
        if not (user.is_admin and user.is_active):
            return False
        return not User.objects.active_admins().exclude(pk=user.pk).exists()

    @staticmethod
    @transaction.atomic
    def create_user(
        *,
        username: str,
        password: str,
        actor=None,
        **extra_fields,
    ) -> User:
        if User.objects.filter(username=username).exists():
            raise DuplicateResourceError(detail=f'Username {username} already exists.')

        user = User.objects.create_user(username=username, password=password, **extra_fields)
        logger.info('User %s created by %s', username, getattr(actor, 'username', None))
        return user

    @classmethod
    @transaction.atomic
    def update_user(cls, *, username: str, password: str | None = None, actor=None, **fields) -> User:
        user = cls._get_for_update(username)

        list(User.objects.active_admins().select_for_update().values_list('pk', flat=True))
        if cls._is_last_admin(user):
            new_role = fields.get('role')
            if new_role and new_role != User.RoleChoices.ADMIN:
                raise BusinessRuleViolation(detail='Cannot demote the last administrator.')
            if fields.get('is_active') is False:
                raise BusinessRuleViolation(detail='Cannot deactivate the last administrator.')

        for field, value in fields.items():
            if field in cls.UPDATABLE_FIELDS:
                setattr(user, field, value)
        if password:
            user.set_password(password)
        user.save()

        logger.info('User %s updated by %s', username, getattr(actor, 'username', None))
        return user

    @classmethod
    @transaction.atomic
    def delete_user(cls, *, username: str, actor=None) -> None:
        user = cls._get_for_update(username)
        # Lock the remaining admins so two concurrent deletes cannot both pass.
        list(User.objects.active_admins().select_for_update().values_list('pk', flat=True))
        if cls._is_last_admin(user):
            raise BusinessRuleViolation(detail='Cannot delete the last administrator.')

        user.delete()
        logger.info('User %s deleted by %s', username, getattr(actor, 'username', None))
