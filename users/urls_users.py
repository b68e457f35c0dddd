"""
Users — User Management URL Configuration

CRUD ViewSet routed under /api/users/, looked up by username.

@file users/urls_users.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import UserViewSet

app_name = 'users'

router = OptionalSlashRouter()
router.register(r'users', UserViewSet, basename='user')

urlpatterns = [
    path('', include(router.urls)),
]
