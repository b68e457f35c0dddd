"""
Reports — Dashboard URL Configuration

@file reports/urls_dashboard.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import DashboardViewSet

app_name = 'dashboard'

router = OptionalSlashRouter()
router.register(r'dashboard', DashboardViewSet, basename='dashboard')

urlpatterns = [
    path('', include(router.urls)),
]
