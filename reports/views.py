"""
Reports — Views

Dashboard, statistics, trends and the .xlsx downloads. Read-only;
any authenticated user.

@file reports/views.py
"""

from django.http import HttpResponse
from rest_framework import serializers, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exports import (
    XLSX_CONTENT_TYPE,
    attachment_name,
    build_assets_workbook,
    build_transactions_workbook,
)
from .services import TREND_PERIODS, DashboardService, ReportService


class TrendQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=list(TREND_PERIODS), default='month')
    startDate = serializers.DateField(required=False)
    endDate = serializers.DateField(required=False)


class AssetExportQuerySerializer(serializers.Serializer):
    type = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)
    department = serializers.CharField(required=False, allow_blank=True)


class TransactionExportQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=['out', 'return'], required=False, allow_blank=True)
    startDate = serializers.DateField(required=False)
    endDate = serializers.DateField(required=False)


def _xlsx_response(content: bytes, prefix: str) -> HttpResponse:
    response = HttpResponse(content, content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{attachment_name(prefix)}"'
    return response


class DashboardViewSet(viewsets.ViewSet):
    """GET /api/dashboard/"""

    permission_classes = [IsAuthenticated]

    def list(self, request):
        return Response({'success': True, 'data': DashboardService.build()})


class ReportViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['get'], url_path='statistics')
    def statistics(self, request):
        return Response({'success': True, 'data': ReportService.statistics()})

    @action(detail=False, methods=['get'], url_path='statistics/assets', url_name='asset-summary')
    def asset_summary(self, request):
        return Response({'success': True, 'data': ReportService.asset_summary()})

    @action(detail=False, methods=['get'], url_path='statistics/transactions', url_name='transaction-summary')
    def transaction_summary(self, request):
        return Response({'success': True, 'data': ReportService.transaction_summary()})

    @action(detail=False, methods=['get'], url_path='recent-activities', url_name='recent-activities')
    def recent_activities(self, request):
        feed = DashboardService.merge_feed(
            DashboardService.recent_stock_in(limit=10),
            DashboardService.recent_stock_out(limit=10),
            [],
        )
        return Response({'success': True, 'data': feed[:10]})

    @action(detail=False, methods=['get'], url_path='trends')
    def trends(self, request):
        ser = TrendQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        data = ReportService.trends(
            period=ser.validated_data['type'],
            start_date=ser.validated_data.get('startDate'),
            end_date=ser.validated_data.get('endDate'),
        )
        return Response({'success': True, 'data': data})

    @action(detail=False, methods=['get'], url_path='assets')
    def assets(self, request):
        ser = AssetExportQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        qs = ReportService.export_assets(
            type=ser.validated_data.get('type') or None,
            status=ser.validated_data.get('status') or None,
            department=ser.validated_data.get('department') or None,
        )
        return _xlsx_response(build_assets_workbook(qs), 'assets_report')

    @action(detail=False, methods=['get'], url_path='transactions')
    def transactions(self, request):
        ser = TransactionExportQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        rows = ReportService.export_transactions(
            type=ser.validated_data.get('type') or None,
            start_date=ser.validated_data.get('startDate'),
            end_date=ser.validated_data.get('endDate'),
        )
        return _xlsx_response(build_transactions_workbook(rows), 'transactions_report')
