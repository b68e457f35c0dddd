"""
Reports — Service Layer

Read-only aggregates over the registry, the stock ledgers and the
Operation Log. Nothing here writes.

@file reports/services.py
"""

from datetime import date

from django.db.models import Count, IntegerField, Q, Sum, Value
from django.db.models.functions import Coalesce, TruncDay, TruncMonth, TruncYear
from django.utils import timezone

from assets.models import Asset, AssetOperation, AssetType
from core.constants import RECENT_ACTIVITY_LIMIT
from core.exceptions import BusinessRuleViolation
from stock.models import StockInRecord, StockOutRecord

UNASSIGNED_DEPARTMENT = 'Unassigned'

TREND_PERIODS = {
    'day': (TruncDay, '%Y-%m-%d'),
    'month': (TruncMonth, '%Y-%m'),
    'year': (TruncYear, '%Y'),
}


def _username(user):
    return user.username if user else None


class DashboardService:

    @staticmethod
    def asset_stats() -> dict:
        return Asset.objects.aggregate(
            total=Count('id'),
            in_stock=Count('id', filter=Q(status=Asset.StatusChoices.IN_STOCK)),
            in_use=Count('id', filter=Q(status=Asset.StatusChoices.IN_USE)),
            scrapped=Count('id', filter=Q(status=Asset.StatusChoices.SCRAPPED)),
        )

    @staticmethod
    def recent_stock_in(limit: int = RECENT_ACTIVITY_LIMIT) -> list[dict]:
        records = (
            StockInRecord.objects.with_totals()
            .select_related('operator')
            .order_by('-created_at')[:limit]
        )
        return [
            {
                'id': str(r.pk),
                'batch_no': r.batch_no,
                'type': r.type,
                'supplier': r.supplier,
                'in_date': r.in_date,
                'operator_name': _username(r.operator),
                'item_count': r.total_items,
                'total_quantity': r.total_quantity,
                'created_at': r.created_at,
            }
            for r in records
        ]

    @staticmethod
    def recent_stock_out(limit: int = RECENT_ACTIVITY_LIMIT) -> list[dict]:
        records = (
            StockOutRecord.objects.with_counts()
            .select_related('operator')
            .order_by('-created_at')[:limit]
        )
        return [
            {
                'id': str(r.pk),
                'batch_no': r.batch_no,
                'recipient': r.recipient,
                'department': r.department,
                'out_date': r.out_date,
                'operator_name': _username(r.operator),
                'item_count': r.total_items,
                'created_at': r.created_at,
            }
            for r in records
        ]

    @staticmethod
    def recent_operations(limit: int = RECENT_ACTIVITY_LIMIT) -> list[dict]:
        ops = (
            AssetOperation.objects.select_related('asset', 'operator')
            .order_by('-created_at')[:limit]
        )
        return [
            {
                'id': str(op.pk),
                'asset_id': str(op.asset_id) if op.asset_id else None,
                'asset_name': op.asset.name if op.asset else None,
                'asset_code': op.asset.code if op.asset else None,
                'operation_type': op.operation_type,
                'notes': op.notes,
                'operator_name': _username(op.operator),
                'created_at': op.created_at,
            }
            for op in ops
        ]

    @staticmethod
    def merge_feed(stock_in, stock_out, operations) -> list[dict]:
        """One activity feed, newest first."""
        feed = [
            {
                'type': 'stock_in',
                'id': row['id'],
                'created_at': row['created_at'],
                'operator_name': row['operator_name'],
                'description': f'Batch {row["batch_no"]}, quantity {row["total_quantity"]}',
            }
            for row in stock_in
        ]
        feed += [
            {
                'type': 'stock_out',
                'id': row['id'],
                'created_at': row['created_at'],
                'operator_name': row['operator_name'],
                'description': (
                    f'Batch {row["batch_no"]}, recipient {row["recipient"]}, '
                    f'department {row["department"]}'
                ),
            }
            for row in stock_out
        ]
        feed += [
            {
                'type': row['operation_type'],
                'id': row['id'],
                'created_at': row['created_at'],
                'operator_name': row['operator_name'],
                'description': f'Asset {row["asset_name"]} ({row["asset_code"] or "no code"})',
            }
            for row in operations
        ]
        feed.sort(key=lambda item: item['created_at'], reverse=True)
        return feed

    @staticmethod
    def assets_by_type() -> list[dict]:
        type_names = dict(AssetType.objects.values_list('code', 'name'))
        rows = (
            Asset.objects.values('type')
            .annotate(
                total_count=Count('id'),
                available_count=Count('id', filter=Q(status=Asset.StatusChoices.IN_STOCK)),
            )
            .order_by('-total_count', 'type')
        )
        return [{**row, 'type_name': type_names.get(row['type'])} for row in rows]

    @staticmethod
    def assets_by_department() -> list[dict]:
        rows = (
            Asset.objects.values('department')
            .annotate(
                asset_count=Count('id'),
                in_use_count=Count('id', filter=Q(status=Asset.StatusChoices.IN_USE)),
            )
            .order_by('-asset_count', 'department')
        )
        return [
            {
                'department_name': row['department'] or UNASSIGNED_DEPARTMENT,
                'asset_count': row['asset_count'],
                'in_use_count': row['in_use_count'],
            }
            for row in rows
        ]

    @classmethod
    def build(cls) -> dict:
        stock_in = cls.recent_stock_in()
        stock_out = cls.recent_stock_out()
        operations = cls.recent_operations()
        return {
            'asset_stats': cls.asset_stats(),
            'recent_stock_in': stock_in,
            'recent_stock_out': stock_out,
            'recent_operations': operations,
            'all_operations': cls.merge_feed(stock_in, stock_out, operations),
            'assets_by_type': cls.assets_by_type(),
            'assets_by_department': cls.assets_by_department(),
        }


class ReportService:

    @staticmethod
    def statistics() -> dict:
        assets = Asset.objects.all()
        return {
            'total': assets.count(),
            'by_status': list(assets.values('status').annotate(count=Count('id')).order_by('status')),
            'by_type': list(assets.values('type').annotate(count=Count('id')).order_by('type')),
            'by_department': list(
                assets.exclude(department__isnull=True)
                .values('department').annotate(count=Count('id')).order_by('department')
            ),
        }

    @staticmethod
    def asset_summary() -> dict:
        """Status counts plus the number of recorded returns."""
        stats = DashboardService.asset_stats()
        stats['returned'] = AssetOperation.objects.filter(
            operation_type=AssetOperation.OperationType.RETURN,
        ).count()
        return stats

    @staticmethod
    def transaction_summary(today: date | None = None) -> dict:
        """Assign (stock-out batch) and return counts, overall and for the current month."""
        today = today or timezone.localdate()
        month_start = today.replace(day=1)
        returns = AssetOperation.objects.filter(operation_type=AssetOperation.OperationType.RETURN)
        return {
            'total_assign': StockOutRecord.objects.count(),
            'monthly_assign': StockOutRecord.objects.filter(
                out_date__gte=month_start, out_date__lte=today,
            ).count(),
            'total_return': returns.count(),
            'monthly_return': returns.filter(created_at__date__gte=month_start).count(),
        }

    @staticmethod
    def trends(*, period: str = 'month', start_date: date | None = None, end_date: date | None = None) -> list[dict]:
        """Stock-in record and item counts grouped by day, month or year of creation."""
        if period not in TREND_PERIODS:
            raise BusinessRuleViolation(
                detail=f'Unknown trend period {period!r}; use one of: {", ".join(TREND_PERIODS)}.',
            )
        trunc, fmt = TREND_PERIODS[period]

        records = StockInRecord.objects.all()
        if start_date:
            records = records.filter(created_at__date__gte=start_date)
        if end_date:
            records = records.filter(created_at__date__lte=end_date)

        rows = (
            records.annotate(bucket=trunc('created_at'))
            .values('bucket')
            .annotate(
                record_count=Count('id', distinct=True),
                item_count=Count('items'),
                unit_count=Coalesce(Sum('items__quantity'), Value(0), output_field=IntegerField()),
            )
            .order_by('bucket')
        )
        return [
            {
                'time_period': row['bucket'].strftime(fmt),
                'record_count': row['record_count'],
                'item_count': row['item_count'],
                'unit_count': row['unit_count'],
            }
            for row in rows
        ]

    @staticmethod
    def export_assets(*, type: str | None = None, status: str | None = None, department: str | None = None):
        qs = Asset.objects.select_related('last_stock_out', 'created_by').order_by('-created_at')
        if type:
            qs = qs.filter(type=type)
        if status:
            qs = qs.filter(status=status)
        if department:
            qs = qs.filter(department__icontains=department)
        return qs

    @staticmethod
    def export_transactions(
        *,
        type: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[dict]:
        """
        Stock-out items (``out``) and return operations (``return``)
        merged newest first. ``type`` limits the output to one kind.
        """
        if type and type not in ('out', 'return'):
            raise BusinessRuleViolation(detail=f'Unknown transaction type {type!r}; use out or return.')

        rows = []
        if type in (None, '', 'out'):
            records = StockOutRecord.objects.select_related('operator').prefetch_related('items__asset')
            if start_date:
                records = records.filter(out_date__gte=start_date)
            if end_date:
                records = records.filter(out_date__lte=end_date)
            for record in records:
                for item in record.items.all():
                    rows.append({
                        'operation_type': 'out',
                        'batch_no': record.batch_no,
                        'asset_code': item.asset.code if item.asset else None,
                        'asset_name': item.asset.name if item.asset else None,
                        'recipient': record.recipient,
                        'department': record.department,
                        'date': record.out_date,
                        'operator_name': _username(record.operator),
                        'notes': record.notes,
                        'created_at': record.created_at,
                    })

        if type in (None, '', 'return'):
            ops = AssetOperation.objects.filter(
                operation_type=AssetOperation.OperationType.RETURN,
            ).select_related('asset', 'operator')
            if start_date:
                ops = ops.filter(created_at__date__gte=start_date)
            if end_date:
                ops = ops.filter(created_at__date__lte=end_date)
            for op in ops:
                rows.append({
                    'operation_type': 'return',
                    'batch_no': None,
                    'asset_code': op.asset.code if op.asset else None,
                    'asset_name': op.asset.name if op.asset else None,
                    'recipient': None,
                    'department': op.asset.department if op.asset else None,
                    'date': timezone.localdate(op.created_at),
                    'operator_name': _username(op.operator),
                    'notes': op.notes,
                    'created_at': op.created_at,
                })

        rows.sort(key=lambda row: row['created_at'], reverse=True)
        return rows
