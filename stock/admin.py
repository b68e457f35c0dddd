"""
Stock — Django Admin Configuration

Read-only ledgers. Batches are recorded through the API only, so the
admin offers no add, change or delete.

@file stock/admin.py
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import StockInItem, StockInRecord, StockOutItem, StockOutRecord


class ReadOnlyLedgerAdmin(admin.ModelAdmin):

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class StockInItemInline(admin.TabularInline):
    model = StockInItem
    fields = ('asset', 'quantity', 'unit_price')
    readonly_fields = fields
    extra = 0
    can_delete = False


class StockOutItemInline(admin.TabularInline):
    model = StockOutItem
    fields = ('asset',)
    readonly_fields = fields
    extra = 0
    can_delete = False


@admin.register(StockInRecord)
class StockInRecordAdmin(ReadOnlyLedgerAdmin):
    list_display = ('batch_no', 'type', 'supplier', 'in_date', 'operator', 'created_at')
    list_filter = ('type', 'in_date')
    search_fields = ('batch_no', 'supplier')
    list_select_related = ('operator',)
    inlines = [StockInItemInline]
    list_per_page = 50
    date_hierarchy = 'in_date'
    ordering = ('-created_at',)

    fieldsets = (
        (_('Batch'), {
            'fields': ('id', 'batch_no', 'type', 'supplier', 'in_date', 'notes'),
        }),
        (_('Audit'), {
            'fields': ('operator', 'created_at'),
        }),
    )
    readonly_fields = ('id', 'batch_no', 'type', 'supplier', 'in_date', 'notes', 'operator', 'created_at')


@admin.register(StockOutRecord)
class StockOutRecordAdmin(ReadOnlyLedgerAdmin):
    list_display = ('batch_no', 'recipient', 'department', 'out_date', 'operator', 'created_at')
    list_filter = ('department', 'out_date')
    search_fields = ('batch_no', 'recipient', 'department')
    list_select_related = ('operator',)
    inlines = [StockOutItemInline]
    list_per_page = 50
    date_hierarchy = 'out_date'
    ordering = ('-created_at',)

    fieldsets = (
        (_('Batch'), {
            'fields': ('id', 'batch_no', 'recipient', 'department', 'out_date', 'notes'),
        }),
        (_('Audit'), {
            'fields': ('operator', 'created_at'),
        }),
    )
    readonly_fields = (
        'id', 'batch_no', 'recipient', 'department', 'out_date', 'notes', 'operator', 'created_at',
    )
