"""
Notifications — Views

The current user's inbox. Every query is scoped to ``request.user``;
another user's notification id behaves as not found.

@file notifications/views.py
"""

from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.constants import UUID_LOOKUP_REGEX

from .serializers import NotificationSerializer
from .services import NotificationService


class NotificationViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    GET    /api/notifications/              unread, newest first
    POST   /api/notifications/{id}/read/
    POST   /api/notifications/read-all/
    DELETE /api/notifications/{id}/
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP_REGEX
    serializer_class = NotificationSerializer
    pagination_class = None
    filter_backends = []

    def get_queryset(self):
        return NotificationService.unread_for(self.request.user)

    def destroy(self, request, pk=None):
        NotificationService.delete(notification_id=pk, user=request.user)
        return Response({'success': True, 'message': 'Notification deleted.'})

    @action(detail=True, methods=['post'], url_path='read')
    def read(self, request, pk=None):
        NotificationService.mark_read(notification_id=pk, user=request.user)
        return Response({'success': True, 'message': 'Notification marked as read.'})

    @action(detail=False, methods=['post'], url_path='read-all', url_name='read-all')
    def read_all(self, request):
        count = NotificationService.mark_all_read(user=request.user)
        return Response({
            'success': True,
            'message': f'{count} notifications marked as read.',
            'data': {'count': count},
        })
