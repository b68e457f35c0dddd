"""
Backups — Views

Admin-only snapshot management.

@file backups/views.py
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsAdminRole

from .serializers import BackupSerializer
from .store import get_backup_store


class BackupListCreateView(APIView):
    """GET lists snapshots newest first; POST creates one."""

    permission_classes = [IsAdminRole]

    def get(self, request):
        backups = get_backup_store().list_backups()
        return Response({'success': True, 'data': BackupSerializer(backups, many=True).data})

    def post(self, request):
        backup = get_backup_store().create()
        return Response(
            {
                'success': True,
                'message': 'Backup created.',
                'data': BackupSerializer(backup).data,
            },
            status=status.HTTP_201_CREATED,
        )


class BackupRestoreView(APIView):
    permission_classes = [IsAdminRole]

    def post(self, request, name):
        backup = get_backup_store().restore(name)
        return Response({
            'success': True,
            'message': f'Database restored from {backup["name"]}.',
            'data': BackupSerializer(backup).data,
        })
