"""
AssetTrack — Test Factories

Factory Boy factories for generating test data. Used across all test
modules.

@file tests/factories.py
"""

from decimal import Decimal

import factory
from django.utils import timezone

from assets.models import Asset, AssetOperation, AssetType
from notifications.models import Notification
from stock.models import StockInItem, StockInRecord, StockOutItem, StockOutRecord
from users.models import User


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f'user{n:04d}')
    name = factory.Faker('name')
    role = User.RoleChoices.USER
    branch = 'HQ'
    is_active = True

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        password = extracted or 'TestPass2026!'
        self.set_password(password)
        if create:
            self.save(update_fields=['password'])


class AdminUserFactory(UserFactory):
    username = factory.Sequence(lambda n: f'admin{n:04d}')
    role = User.RoleChoices.ADMIN
    is_staff = True


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------

class AssetTypeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = AssetType
        django_get_or_create = ('code',)

    code = factory.Sequence(lambda n: f'type{n:03d}')
    name = factory.LazyAttribute(lambda o: o.code.title())
    low_stock_threshold = 0


class AssetFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Asset

    name = factory.Sequence(lambda n: f'Asset {n}')
    type = 'computer'
    status = Asset.StatusChoices.IN_STOCK
    department = 'IT'
    description = ''


class AssetOperationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = AssetOperation

    asset = factory.SubFactory(AssetFactory)
    operation_type = AssetOperation.OperationType.RETURN
    operator = factory.SubFactory(UserFactory)
    notes = ''


# ---------------------------------------------------------------------------
# Stock ledgers
# ---------------------------------------------------------------------------

class StockInRecordFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = StockInRecord

    batch_no = factory.Sequence(lambda n: f'IN-TEST-{n:05d}')
    type = StockInRecord.SourceType.PURCHASE
    supplier = 'Acme Supplies'
    in_date = factory.LazyFunction(timezone.localdate)
    operator = factory.SubFactory(UserFactory)


class StockInItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = StockInItem

    record = factory.SubFactory(StockInRecordFactory)
    asset = factory.SubFactory(AssetFactory)
    quantity = 1
    unit_price = Decimal('100.00')


class StockOutRecordFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = StockOutRecord

    batch_no = factory.Sequence(lambda n: f'OUT-TEST-{n:05d}')
    recipient = factory.Faker('name')
    department = 'Sales'
    out_date = factory.LazyFunction(timezone.localdate)
    operator = factory.SubFactory(UserFactory)


class StockOutItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = StockOutItem

    record = factory.SubFactory(StockOutRecordFactory)
    asset = factory.SubFactory(AssetFactory)


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

class NotificationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Notification

    user = factory.SubFactory(UserFactory)
    type = Notification.NotificationType.SYSTEM
    title = factory.Sequence(lambda n: f'Notice {n}')
    content = 'Something happened.'
    is_read = False
