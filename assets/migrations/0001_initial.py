import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AssetType',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(max_length=50, unique=True, verbose_name='code')),
                ('name', models.CharField(max_length=100, verbose_name='name')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('low_stock_threshold', models.PositiveIntegerField(default=0, help_text='Alert admins when in-stock units fall to this level. 0 disables.', verbose_name='low stock threshold')),
            ],
            options={
                'verbose_name': 'asset type',
                'verbose_name_plural': 'asset types',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Asset',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(blank=True, max_length=64, null=True, unique=True, verbose_name='code')),
                ('name', models.CharField(max_length=200, verbose_name='name')),
                ('type', models.CharField(db_index=True, max_length=50, verbose_name='type')),
                ('status', models.CharField(choices=[('in_stock', 'In stock'), ('in_use', 'In use'), ('scrapped', 'Scrapped')], db_index=True, default='in_stock', max_length=10, verbose_name='status')),
                ('department', models.CharField(blank=True, max_length=100, null=True, verbose_name='department')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='created by')),
            ],
            options={
                'verbose_name': 'asset',
                'verbose_name_plural': 'assets',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['type', 'status'], name='asset_type_status_idx'),
                    models.Index(fields=['department'], name='asset_department_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AssetOperation',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('operation_type', models.CharField(choices=[('return', 'Return'), ('scrap', 'Scrap')], db_index=True, max_length=10, verbose_name='operation type')),
                ('notes', models.TextField(blank=True, verbose_name='notes')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('asset', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='operations', to='assets.asset', verbose_name='asset')),
                ('operator', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='operator')),
            ],
            options={
                'verbose_name': 'asset operation',
                'verbose_name_plural': 'asset operations',
                'ordering': ['-created_at'],
            },
        ),
    ]
