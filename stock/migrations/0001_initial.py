import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('assets', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='StockInRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('batch_no', models.CharField(max_length=64, unique=True, verbose_name='batch number')),
                ('type', models.CharField(choices=[('purchase', 'Purchase'), ('transfer', 'Transfer'), ('donation', 'Donation'), ('other', 'Other')], default='purchase', max_length=20, verbose_name='source type')),
                ('supplier', models.CharField(blank=True, max_length=200, verbose_name='supplier')),
                ('in_date', models.DateField(default=django.utils.timezone.localdate, verbose_name='stock-in date')),
                ('notes', models.TextField(blank=True, verbose_name='notes')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('operator', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='operator')),
            ],
            options={
                'verbose_name': 'stock-in record',
                'verbose_name_plural': 'stock-in records',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='StockInItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(verbose_name='quantity')),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=12, verbose_name='unit price')),
                ('asset', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stock_in_items', to='assets.asset', verbose_name='asset')),
                ('record', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='stock.stockinrecord', verbose_name='stock-in record')),
            ],
            options={
                'verbose_name': 'stock-in item',
                'verbose_name_plural': 'stock-in items',
            },
        ),
        migrations.CreateModel(
            name='StockOutRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('batch_no', models.CharField(max_length=64, unique=True, verbose_name='batch number')),
                ('recipient', models.CharField(max_length=150, verbose_name='recipient')),
                ('department', models.CharField(max_length=100, verbose_name='department')),
                ('out_date', models.DateField(db_index=True, default=django.utils.timezone.localdate, verbose_name='stock-out date')),
                ('notes', models.TextField(blank=True, verbose_name='notes')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('operator', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='operator')),
            ],
            options={
                'verbose_name': 'stock-out record',
                'verbose_name_plural': 'stock-out records',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='StockOutItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('asset', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='stock_out_items', to='assets.asset', verbose_name='asset')),
                ('record', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='stock.stockoutrecord', verbose_name='stock-out record')),
            ],
            options={
                'verbose_name': 'stock-out item',
                'verbose_name_plural': 'stock-out items',
                'constraints': [
                    models.UniqueConstraint(fields=('record', 'asset'), name='unique_stock_out_asset'),
                ],
            },
        ),
    ]
