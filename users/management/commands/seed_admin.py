"""
Users — Management Command: seed_admin

Creates the initial administrator account so a fresh database can be
logged into.

Usage::

    python manage.py seed_admin --username admin --password 'S3cret!'

Idempotent: an existing account with the same username is left as is.

@file users/management/commands/seed_admin.py
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from users.models import User


class Command(BaseCommand):
    help = 'Create the initial administrator account.'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='admin')
        parser.add_argument('--password', default=None)
        parser.add_argument('--name', default='Administrator')
        parser.add_argument('--branch', default='')

    @transaction.atomic
    def handle(self, *args, **options):
        username = options['username']
        if User.objects.filter(username=username).exists():
            self.stdout.write(f'  Exists: {username}')
            return

        password = options['password']
        if not password:
            raise CommandError('--password is required when creating the administrator.')

        User.objects.create_superuser(
            username=username,
            password=password,
            name=options['name'],
            branch=options['branch'],
        )
        self.stdout.write(self.style.SUCCESS(f'Administrator {username} created.'))
