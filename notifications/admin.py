"""
Notifications — Django Admin Configuration

@file notifications/admin.py
"""

from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('title', 'type', 'user', 'is_read', 'created_at')
    list_filter = ('type', 'is_read', 'created_at')
    search_fields = ('title', 'content', 'user__username')
    readonly_fields = ('id', 'created_at', 'updated_at')
    list_select_related = ('user',)
    date_hierarchy = 'created_at'
    ordering = ('-created_at',)
