"""
Backups — Serializers

@file backups/serializers.py
"""

from rest_framework import serializers


class BackupSerializer(serializers.Serializer):
    name = serializers.CharField()
    size = serializers.IntegerField()
    time = serializers.DateTimeField()
