"""
Assets — Asset Type Catalog URL Configuration

@file assets/urls_types.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import AssetTypeViewSet

app_name = 'asset_types'

router = OptionalSlashRouter()
router.register(r'asset-types', AssetTypeViewSet, basename='asset-type')

urlpatterns = [
    path('', include(router.urls)),
]
