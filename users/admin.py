"""
Users — Django Admin Configuration

Admin panel for User accounts with role badges.

@file users/admin.py
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin keyed on username, with a role badge column."""

    list_display = (
        'username', 'name', 'role_badge', 'branch', 'is_active', 'last_login',
    )
    list_filter = ('role', 'is_active', 'is_staff', 'branch')
    search_fields = ('username', 'name', 'branch')
    readonly_fields = ('id', 'created_at', 'updated_at', 'date_joined', 'last_login')
    date_hierarchy = 'created_at'
    list_per_page = 30
    ordering = ('-created_at',)

    fieldsets = (
        (None, {
            'fields': ('id', 'username', 'password'),
        }),
        (_('Profile'), {
            'fields': ('name', 'role', 'branch'),
        }),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        (_('Audit'), {
            'fields': ('date_joined', 'last_login', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'password1', 'password2', 'name', 'role', 'branch'),
        }),
    )

    @admin.display(description=_('Role'))
    def role_badge(self, obj):
        color = '#ef4444' if obj.is_admin else '#3b82f6'
        return format_html(
            '<span style="background:{}; color:#fff; padding:2px 8px; '
            'border-radius:4px; font-size:11px; font-weight:600;">{}</span>',
            color, obj.get_role_display(),
        )
