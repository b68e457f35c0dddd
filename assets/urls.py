"""
Assets — URL Configuration

@file assets/urls.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import AssetViewSet

app_name = 'assets'

router = OptionalSlashRouter()
router.register(r'assets', AssetViewSet, basename='asset')

urlpatterns = [
    path('', include(router.urls)),
]
