"""
Stock — Views

Stock-in and stock-out ledgers. Batches are created through the
service layer and are immutable afterwards: no update, no delete.

@file stock/views.py
"""

from django.db.models import Prefetch
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.constants import UUID_LOOKUP_REGEX

from .filters import StockInFilter, StockOutFilter
from .models import StockInItem, StockInRecord, StockOutItem, StockOutRecord
from .serializers import (
    StockInCreateSerializer,
    StockInRecordDetailSerializer,
    StockInRecordListSerializer,
    StockOutCreateSerializer,
    StockOutRecordDetailSerializer,
    StockOutRecordListSerializer,
)
from .services import StockInService, StockOutService


class StockInViewSet(mixins.CreateModelMixin, viewsets.ReadOnlyModelViewSet):
    """
    GET  /api/stock-in/        paginated batches with totals
    GET  /api/stock-in/{id}/   batch with its item lines
    POST /api/stock-in/        record a batch; creates the assets
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP_REGEX
    filterset_class = StockInFilter
    search_fields = ['batch_no', 'supplier']
    ordering_fields = ['in_date', 'created_at', 'batch_no']
    ordering = ['-created_at']

    def get_queryset(self):
        qs = StockInRecord.objects.with_totals().select_related('operator')
        if self.action == 'retrieve':
            qs = qs.prefetch_related(
                Prefetch('items', queryset=StockInItem.objects.select_related('asset')),
            )
        return qs

    def get_serializer_class(self):
        if self.action == 'create':
            return StockInCreateSerializer
        if self.action == 'retrieve':
            return StockInRecordDetailSerializer
        return StockInRecordListSerializer

    def create(self, request, *args, **kwargs):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        record = StockInService.create_stock_in(
            items=[dict(item) for item in data['items']],
            batch_no=data.get('batch_no') or None,
            type=data['type'],
            supplier=data['supplier'],
            in_date=data.get('in_date'),
            notes=data['notes'],
            operator=request.user,
        )
        record = self.get_queryset().prefetch_related('items__asset').get(pk=record.pk)
        return Response(
            {
                'success': True,
                'message': f'Stock-in {record.batch_no} recorded.',
                'data': StockInRecordDetailSerializer(record).data,
            },
            status=status.HTTP_201_CREATED,
        )


class StockOutViewSet(mixins.CreateModelMixin, viewsets.ReadOnlyModelViewSet):
    """
    GET  /api/stock-out/        paginated batches with item counts
    GET  /api/stock-out/{id}/   batch with its assets
    POST /api/stock-out/        hand out in_stock assets
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP_REGEX
    filterset_class = StockOutFilter
    search_fields = ['batch_no', 'recipient', 'department']
    ordering_fields = ['out_date', 'created_at', 'batch_no']
    ordering = ['-created_at']

    def get_queryset(self):
        qs = StockOutRecord.objects.with_counts().select_related('operator')
        if self.action == 'retrieve':
            qs = qs.prefetch_related(
                Prefetch('items', queryset=StockOutItem.objects.select_related('asset')),
            )
        return qs

    def get_serializer_class(self):
        if self.action == 'create':
            return StockOutCreateSerializer
        if self.action == 'retrieve':
            return StockOutRecordDetailSerializer
        return StockOutRecordListSerializer

    def create(self, request, *args, **kwargs):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        record = StockOutService.create_stock_out(
            assets=[dict(entry) for entry in data['assets']],
            recipient=data['recipient'],
            department=data['department'],
            batch_no=data.get('batch_no') or None,
            out_date=data.get('out_date'),
            notes=data['notes'],
            operator=request.user,
        )
        record = self.get_queryset().prefetch_related('items__asset').get(pk=record.pk)
        return Response(
            {
                'success': True,
                'message': f'Stock-out {record.batch_no} recorded.',
                'data': StockOutRecordDetailSerializer(record).data,
            },
            status=status.HTTP_201_CREATED,
        )
