"""
Stock — Serializers

Request shapes for creating stock-in / stock-out batches and the read
serializers for ledger list and detail views.

@file stock/serializers.py
"""

from rest_framework import serializers

from .models import StockInItem, StockInRecord, StockOutItem, StockOutRecord


# ---------------------------------------------------------------------------
# Stock-in
# ---------------------------------------------------------------------------

class StockInItemInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    type = serializers.CharField(max_length=50)
    department = serializers.CharField(max_length=100)
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class StockInCreateSerializer(serializers.Serializer):
    batch_no = serializers.CharField(max_length=64, required=False, allow_blank=True)
    type = serializers.ChoiceField(
        choices=StockInRecord.SourceType.choices,
        default=StockInRecord.SourceType.PURCHASE,
    )
    supplier = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    in_date = serializers.DateField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    items = StockInItemInputSerializer(many=True, allow_empty=False)


class StockInItemReadSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='asset.name', read_only=True, default=None)
    type = serializers.CharField(source='asset.type', read_only=True, default=None)
    department = serializers.CharField(source='asset.department', read_only=True, default=None)
    description = serializers.CharField(source='asset.description', read_only=True, default=None)
    amount = serializers.SerializerMethodField()

    class Meta:
        model = StockInItem
        fields = [
            'id', 'asset', 'quantity', 'unit_price', 'amount',
            'name', 'type', 'department', 'description',
        ]
        read_only_fields = fields

    def get_amount(self, obj):
        return obj.quantity * obj.unit_price


class StockInRecordListSerializer(serializers.ModelSerializer):
    """Expects a queryset annotated by StockInQuerySet.with_totals()."""

    operator_name = serializers.CharField(source='operator.username', read_only=True, default=None)
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    total_quantity = serializers.IntegerField(read_only=True)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = StockInRecord
        fields = [
            'id', 'batch_no', 'type', 'type_display', 'supplier', 'in_date',
            'operator', 'operator_name', 'notes',
            'total_items', 'total_quantity', 'total_amount',
            'created_at',
        ]
        read_only_fields = fields


class StockInRecordDetailSerializer(StockInRecordListSerializer):
    items = StockInItemReadSerializer(many=True, read_only=True)

    class Meta(StockInRecordListSerializer.Meta):
        fields = StockInRecordListSerializer.Meta.fields + ['items']
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Stock-out
# ---------------------------------------------------------------------------

class StockOutAssetInputSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    code = serializers.CharField(max_length=64, required=False, allow_blank=True)


class StockOutCreateSerializer(serializers.Serializer):
    batch_no = serializers.CharField(max_length=64, required=False, allow_blank=True)
    recipient = serializers.CharField(max_length=150)
    department = serializers.CharField(max_length=100)
    out_date = serializers.DateField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    assets = StockOutAssetInputSerializer(many=True, allow_empty=False)


class StockOutItemReadSerializer(serializers.ModelSerializer):
    asset_code = serializers.CharField(source='asset.code', read_only=True, default=None)
    asset_name = serializers.CharField(source='asset.name', read_only=True, default=None)
    asset_type = serializers.CharField(source='asset.type', read_only=True, default=None)
    asset_status = serializers.CharField(source='asset.status', read_only=True, default=None)

    class Meta:
        model = StockOutItem
        fields = ['id', 'asset', 'asset_code', 'asset_name', 'asset_type', 'asset_status']
        read_only_fields = fields


class StockOutRecordListSerializer(serializers.ModelSerializer):
    """Expects a queryset annotated by StockOutQuerySet.with_counts()."""

    operator_name = serializers.CharField(source='operator.username', read_only=True, default=None)
    total_items = serializers.IntegerField(read_only=True)

    class Meta:
        model = StockOutRecord
        fields = [
            'id', 'batch_no', 'recipient', 'department', 'out_date',
            'operator', 'operator_name', 'notes', 'total_items', 'created_at',
        ]
        read_only_fields = fields


class StockOutRecordDetailSerializer(StockOutRecordListSerializer):
    items = StockOutItemReadSerializer(many=True, read_only=True)

    class Meta(StockOutRecordListSerializer.Meta):
        fields = StockOutRecordListSerializer.Meta.fields + ['items']
        read_only_fields = fields
