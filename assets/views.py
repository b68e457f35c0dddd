"""
Assets — Views

DRF ViewSets for the asset registry, lifecycle actions, the Operation
Log and the asset type catalog.

@file assets/views.py
"""

from django.http import HttpResponse
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.constants import UUID_LOOKUP_REGEX
from users.permissions import IsAdminRole, IsAdminRoleOrReadOnly

from .filters import AssetFilter
from .models import Asset, AssetOperation, AssetType
from .serializers import (
    AssetCreateSerializer,
    AssetOperationSerializer,
    AssetReadSerializer,
    AssetTypeCreateSerializer,
    AssetTypeReadSerializer,
    AssetTypeUpdateSerializer,
    AssetUpdateSerializer,
    AssignSerializer,
    LifecycleNoteSerializer,
)
from .services import AssetService, AssetTypeService, LifecycleService


class AssetViewSet(viewsets.ModelViewSet):
    """
    Asset registry.

    List/retrieve/create/update open to any authenticated user.
    Delete is an administrative hard delete (admin only).
    Status changes only through the assign / return / scrap actions.
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_LOOKUP_REGEX
    filterset_class = AssetFilter
    ordering_fields = ['created_at', 'updated_at', 'name', 'code', 'status']
    ordering = ['-created_at']

    def get_permissions(self):
        if self.action == 'destroy':
            return [IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        return Asset.objects.select_related('last_stock_out')

    def get_serializer_class(self):
        if self.action == 'create':
            return AssetCreateSerializer
        if self.action in ('update', 'partial_update'):
            return AssetUpdateSerializer
        return AssetReadSerializer

    def create(self, request, *args, **kwargs):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        asset = AssetService.create_asset(actor=request.user, **ser.validated_data)
        return Response(
            {'success': True, 'data': AssetReadSerializer(asset).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        kwargs.pop('partial', None)
        ser = AssetUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        asset = AssetService.update_description(
            asset_id=self.get_object().pk,
            description=ser.validated_data['description'],
            actor=request.user,
        )
        return Response({'success': True, 'data': AssetReadSerializer(asset).data})

    def destroy(self, request, *args, **kwargs):
        AssetService.delete_asset(asset_id=self.get_object().pk, actor=request.user)
        return Response({'success': True, 'message': 'Asset deleted.'})

    # --- Lookup by code ---

    @action(detail=False, methods=['get'], url_path=r'code/(?P<code>[^/]+)', url_name='by-code')
    def by_code(self, request, code=None):
        asset = AssetService.get_by_code(code)
        return Response({'success': True, 'data': AssetReadSerializer(asset).data})

    # --- Lifecycle ---

    @action(detail=True, methods=['post'], url_path='assign')
    def assign(self, request, pk=None):
        ser = AssignSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        record = LifecycleService.assign(
            asset_id=pk,
            recipient=ser.validated_data['recipient'],
            department=ser.validated_data['department'],
            out_date=ser.validated_data.get('out_date'),
            code=ser.validated_data.get('code') or None,
            notes=ser.validated_data['notes'],
            operator=request.user,
        )
        asset = AssetService.get_by_id(pk)
        return Response({
            'success': True,
            'message': f'Asset assigned under batch {record.batch_no}.',
            'data': AssetReadSerializer(asset).data,
        })

    @action(detail=True, methods=['post'], url_path='return', url_name='return')
    def return_asset(self, request, pk=None):
        ser = LifecycleNoteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        asset = LifecycleService.return_asset(
            asset_id=pk, notes=ser.validated_data['notes'], operator=request.user,
        )
        return Response({
            'success': True,
            'message': 'Asset returned.',
            'data': AssetReadSerializer(asset).data,
        })

    @action(detail=True, methods=['post'], url_path='scrap')
    def scrap(self, request, pk=None):
        ser = LifecycleNoteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        asset = LifecycleService.scrap_asset(
            asset_id=pk, notes=ser.validated_data['notes'], operator=request.user,
        )
        return Response({
            'success': True,
            'message': 'Asset scrapped.',
            'data': AssetReadSerializer(asset).data,
        })

    # --- Operation Log ---

    @action(detail=True, methods=['get'], url_path='operations')
    def operations(self, request, pk=None):
        asset = self.get_object()
        ops = asset.operations.select_related('operator').order_by('-created_at')
        ser = AssetOperationSerializer(ops, many=True)
        return Response({'success': True, 'data': ser.data})

    @action(detail=False, methods=['get'], url_path='operations', url_name='operation-log')
    def operation_log(self, request):
        ops = AssetOperation.objects.select_related('asset', 'operator').order_by('-created_at')
        op_type = request.query_params.get('type')
        if op_type:
            ops = ops.filter(operation_type=op_type)
        page = self.paginate_queryset(ops)
        if page is not None:
            ser = AssetOperationSerializer(page, many=True)
            return self.get_paginated_response(ser.data)
        ser = AssetOperationSerializer(ops, many=True)
        return Response({'success': True, 'data': ser.data})

    # --- QR label ---

    @action(detail=True, methods=['get'], url_path='qrcode')
    def qrcode(self, request, pk=None):
        asset = self.get_object()
        png = AssetService.render_qr_png(asset)
        response = HttpResponse(png, content_type='image/png')
        response['Content-Disposition'] = f'inline; filename="asset_{asset.code or asset.pk}_qr.png"'
        return response


class AssetTypeViewSet(viewsets.ModelViewSet):
    """
    Asset type catalog. Read by any authenticated user; written by
    admins. A type still used by assets cannot be deleted.
    """

    permission_classes = [IsAdminRoleOrReadOnly]
    lookup_value_regex = UUID_LOOKUP_REGEX
    pagination_class = None
    search_fields = ['code', 'name']
    ordering = ['code']

    def get_queryset(self):
        return AssetType.objects.all()

    def get_serializer_class(self):
        if self.action == 'create':
            return AssetTypeCreateSerializer
        if self.action in ('update', 'partial_update'):
            return AssetTypeUpdateSerializer
        return AssetTypeReadSerializer

    def create(self, request, *args, **kwargs):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        asset_type = AssetTypeService.create_type(actor=request.user, **ser.validated_data)
        return Response(
            {'success': True, 'data': AssetTypeReadSerializer(asset_type).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        ser = self.get_serializer(instance, data=request.data, partial=partial)
        ser.is_valid(raise_exception=True)
        asset_type = AssetTypeService.update_type(
            type_id=instance.pk, actor=request.user, **ser.validated_data,
        )
        return Response({'success': True, 'data': AssetTypeReadSerializer(asset_type).data})

    def destroy(self, request, *args, **kwargs):
        AssetTypeService.delete_type(type_id=self.get_object().pk, actor=request.user)
        return Response({'success': True, 'message': 'Asset type deleted.'})
