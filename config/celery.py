"""
AssetTrack — Celery Application

Workers and beat load Django settings from DJANGO_SETTINGS_MODULE and
discover ``tasks.py`` in every installed app.

@file config/celery.py
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

app = Celery('assettrack')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
