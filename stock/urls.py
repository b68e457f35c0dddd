"""
Stock — Stock-in URL Configuration

@file stock/urls.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import StockInViewSet

app_name = 'stock_in'

router = OptionalSlashRouter()
router.register(r'stock-in', StockInViewSet, basename='stock-in')

urlpatterns = [
    path('', include(router.urls)),
]
