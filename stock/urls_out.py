"""
Stock — Stock-out URL Configuration

@file stock/urls_out.py
"""

from django.urls import include, path

from core.routers import OptionalSlashRouter

from .views import StockOutViewSet

app_name = 'stock_out'

router = OptionalSlashRouter()
router.register(r'stock-out', StockOutViewSet, basename='stock-out')

urlpatterns = [
    path('', include(router.urls)),
]
