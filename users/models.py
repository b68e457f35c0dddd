"""
Users — Models

Custom User model with UUID PK, username-based auth and a two-level
role (admin / user). At least one admin must exist at all times; the
invariant is enforced in users/services.py.

@file users/models.py
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.models import BaseModel
from users.managers import UserManager


class User(AbstractBaseUser, PermissionsMixin, BaseModel):
    """
    AssetTrack account.

    ``role`` drives API authorization: admins manage users, the type
    catalog, backups and may hard-delete assets. ``branch`` is the
    office the account belongs to and travels in the JWT claims.
    """

    class RoleChoices(models.TextChoices):
        ADMIN = 'admin', _('Administrator')
        USER = 'user', _('User')

    username = models.CharField(_('username'), max_length=150, unique=True)
    name = models.CharField(_('display name'), max_length=150, blank=True)
    role = models.CharField(
        _('role'), max_length=10,
        choices=RoleChoices.choices, default=RoleChoices.USER,
        db_index=True,
    )
    branch = models.CharField(_('branch'), max_length=100, blank=True)

    is_staff = models.BooleanField(_('staff status'), default=False)
    is_active = models.BooleanField(_('active'), default=True)
    date_joined = models.DateTimeField(_('date joined'), default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = _('user')
        verbose_name_plural = _('users')
        ordering = ['-created_at']

    def __str__(self):
        return self.name or self.username

    def get_full_name(self):
        return self.name or self.username

    def get_short_name(self):
        return self.username

    @property
    def is_admin(self) -> bool:
        return self.role == self.RoleChoices.ADMIN
