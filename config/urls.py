"""
AssetTrack — Root URL Configuration

All API endpoints are namespaced under /api/.
The DRF browsable API is available for route inspection in development.

@file config/urls.py
"""

from django.contrib import admin
from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse

admin.site.site_header = 'AssetTrack Administration'
admin.site.site_title = 'AssetTrack'
admin.site.index_title = 'IT Asset Management'


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """AssetTrack API endpoint directory."""
    return Response({
        'auth': {
            'login': reverse('api:auth:login', request=request, format=format),
            'refresh': reverse('api:auth:token-refresh', request=request, format=format),
            'logout': reverse('api:auth:logout', request=request, format=format),
            'me': reverse('api:auth:me', request=request, format=format),
        },
        'users': reverse('api:users:user-list', request=request, format=format),
        'assets': reverse('api:assets:asset-list', request=request, format=format),
        'asset_types': reverse('api:asset_types:asset-type-list', request=request, format=format),
        'stock_in': reverse('api:stock_in:stock-in-list', request=request, format=format),
        'stock_out': reverse('api:stock_out:stock-out-list', request=request, format=format),
        'dashboard': reverse('api:dashboard:dashboard-list', request=request, format=format),
        'reports': {
            'statistics': reverse('api:reports:report-statistics', request=request, format=format),
            'trends': reverse('api:reports:report-trends', request=request, format=format),
        },
        'backup': reverse('api:backups:backup-list', request=request, format=format),
        'notifications': reverse('api:notifications:notification-list', request=request, format=format),
    })


api_patterns = [
    path('', api_root, name='api-root'),
    path('auth/', include('users.urls', namespace='auth')),
    path('', include('users.urls_users', namespace='users')),
    path('', include('assets.urls', namespace='assets')),
    path('', include('assets.urls_types', namespace='asset_types')),
    path('', include('stock.urls', namespace='stock_in')),
    path('', include('stock.urls_out', namespace='stock_out')),
    path('', include('reports.urls_dashboard', namespace='dashboard')),
    path('', include('reports.urls', namespace='reports')),
    path('', include('backups.urls', namespace='backups')),
    path('', include('notifications.urls', namespace='notifications')),
]

urlpatterns = [
    path('admin/', admin.site.urls),

    # DRF session auth (powers the "Log in" button on the browsable API)
    path('api-auth/', include('rest_framework.urls', namespace='rest_framework')),

    path('api/', include((api_patterns, 'api'))),
]
