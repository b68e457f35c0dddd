"""
Reports — URL Configuration

@file reports/urls.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import ReportViewSet

app_name = 'reports'

router = OptionalSlashRouter()
router.register(r'reports', ReportViewSet, basename='report')

urlpatterns = [
    path('', include(router.urls)),
]
