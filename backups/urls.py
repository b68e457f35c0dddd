"""
Backups — URL Configuration

@file backups/urls.py
"""

from django.urls import re_path

from .views import BackupListCreateView, BackupRestoreView

app_name = 'backups'

urlpatterns = [
    re_path(r'^backup/?$', BackupListCreateView.as_view(), name='backup-list'),
    re_path(r'^backup/(?P<name>[^/]+)/restore/?$', BackupRestoreView.as_view(), name='backup-restore'),
]
