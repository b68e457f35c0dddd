"""
Notifications — URL Configuration

@file notifications/urls.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import NotificationViewSet

app_name = 'notifications'

router = OptionalSlashRouter()
router.register(r'notifications', NotificationViewSet, basename='notification')

urlpatterns = [
    path('', include(router.urls)),
]
