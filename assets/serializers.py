"""
Assets — Serializers

Read and write serializers for Asset, AssetType and AssetOperation,
plus the request shapes of the lifecycle actions.

@file assets/serializers.py
"""

from rest_framework import serializers

from .models import Asset, AssetOperation, AssetType


# ---------------------------------------------------------------------------
# AssetType
# ---------------------------------------------------------------------------

class AssetTypeReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = AssetType
        fields = [
            'id', 'code', 'name', 'description', 'low_stock_threshold',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class AssetTypeCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = AssetType
        fields = ['code', 'name', 'description', 'low_stock_threshold']
        # Duplicate codes are reported by AssetTypeService as conflicts.
        extra_kwargs = {'code': {'validators': []}}

    def validate_code(self, value):
        return value.strip()


class AssetTypeUpdateSerializer(serializers.ModelSerializer):
    """``code`` is immutable after creation."""

    class Meta:
        model = AssetType
        fields = ['name', 'description', 'low_stock_threshold']


# ---------------------------------------------------------------------------
# Asset
# ---------------------------------------------------------------------------

class AssetReadSerializer(serializers.ModelSerializer):
    """Asset joined with its current stock-out batch, if any."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    recipient = serializers.CharField(source='last_stock_out.recipient', read_only=True, default=None)
    current_department = serializers.CharField(
        source='last_stock_out.department', read_only=True, default=None,
    )
    out_date = serializers.DateField(source='last_stock_out.out_date', read_only=True, default=None)
    stock_out_batch_no = serializers.CharField(
        source='last_stock_out.batch_no', read_only=True, default=None,
    )

    class Meta:
        model = Asset
        fields = [
            'id', 'code', 'name', 'type', 'status', 'status_display',
            'department', 'description',
            'last_stock_out', 'stock_out_batch_no', 'recipient', 'current_department', 'out_date',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class AssetCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Asset
        fields = ['name', 'type', 'department', 'description']
        extra_kwargs = {
            'department': {'required': False, 'allow_null': True},
            'description': {'required': False},
        }


class AssetUpdateSerializer(serializers.ModelSerializer):
    """Only the free-text description is editable outside the lifecycle."""

    class Meta:
        model = Asset
        fields = ['description']
        extra_kwargs = {'description': {'required': True, 'allow_blank': True}}


# ---------------------------------------------------------------------------
# Lifecycle actions
# ---------------------------------------------------------------------------

class AssignSerializer(serializers.Serializer):
    recipient = serializers.CharField(max_length=150)
    department = serializers.CharField(max_length=100)
    out_date = serializers.DateField(required=False)
    code = serializers.CharField(max_length=64, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class LifecycleNoteSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True, default='')


# ---------------------------------------------------------------------------
# Operation Log
# ---------------------------------------------------------------------------

class AssetOperationSerializer(serializers.ModelSerializer):
    asset_code = serializers.CharField(source='asset.code', read_only=True, default=None)
    asset_name = serializers.CharField(source='asset.name', read_only=True, default=None)
    operator_name = serializers.CharField(source='operator.username', read_only=True, default=None)

    class Meta:
        model = AssetOperation
        fields = [
            'id', 'asset', 'asset_code', 'asset_name',
            'operation_type', 'operator', 'operator_name', 'notes', 'created_at',
        ]
        read_only_fields = fields
