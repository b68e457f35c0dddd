"""
Assets — Django Admin Configuration

Admin for the asset registry and type catalog, plus a read-only view
of the Operation Log (insert-only).

@file assets/admin.py
"""

from django.contrib import admin
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .models import Asset, AssetOperation, AssetType


@admin.register(AssetType)
class AssetTypeAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'low_stock_threshold', 'created_at')
    search_fields = ('code', 'name')
    readonly_fields = ('id', 'created_at', 'updated_at')
    ordering = ('code',)


@admin.register(Asset)
class AssetAdmin(admin.ModelAdmin):
    """Registry browser. Status is read-only here; it changes through the API lifecycle."""

    list_display = (
        'code', 'name', 'type', 'status_badge', 'department', 'last_stock_out', 'created_at',
    )
    list_filter = ('status', 'type')
    search_fields = ('code', 'name', 'department')
    readonly_fields = ('id', 'status', 'last_stock_out', 'created_by', 'created_at', 'updated_at')
    list_select_related = ('last_stock_out',)
    show_full_result_count = False
    list_per_page = 50
    date_hierarchy = 'created_at'
    ordering = ('-created_at',)

    fieldsets = (
        (_('Asset'), {
            'fields': ('id', 'code', 'name', 'type', 'department', 'description'),
        }),
        (_('Lifecycle'), {
            'fields': ('status', 'last_stock_out'),
        }),
        (_('Audit'), {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    @admin.display(description=_('Status'))
    def status_badge(self, obj):
        colors = {
            'in_stock': '#22c55e',
            'in_use': '#3b82f6',
            'scrapped': '#6b7280',
        }
        color = colors.get(obj.status, '#6b7280')
        return format_html(
            '<span style="background:{}; color:#fff; padding:2px 8px; '
            'border-radius:4px; font-size:11px; font-weight:600;">{}</span>',
            color, obj.get_status_display(),
        )


@admin.register(AssetOperation)
class AssetOperationAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'operation_type', 'asset', 'operator', 'notes')
    list_filter = ('operation_type', 'created_at')
    search_fields = ('asset__code', 'asset__name', 'notes')
    readonly_fields = ('id', 'asset', 'operation_type', 'operator', 'notes', 'created_at')
    list_select_related = ('asset', 'operator')
    list_per_page = 50
    date_hierarchy = 'created_at'
    ordering = ('-created_at',)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False  # insert-only

    def has_delete_permission(self, request, obj=None):
        return False  # insert-only
