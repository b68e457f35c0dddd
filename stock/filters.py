"""
Stock — Filters

Date-range filters for the stock-in and stock-out ledgers
(?startDate=YYYY-MM-DD&endDate=YYYY-MM-DD, both inclusive).

@file stock/filters.py
"""

import django_filters

from .models import StockInRecord, StockOutRecord


class StockInFilter(django_filters.FilterSet):
    startDate = django_filters.DateFilter(field_name='in_date', lookup_expr='gte')
    endDate = django_filters.DateFilter(field_name='in_date', lookup_expr='lte')
    batch_no = django_filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = StockInRecord
        fields = ['type', 'supplier']


class StockOutFilter(django_filters.FilterSet):
    startDate = django_filters.DateFilter(field_name='out_date', lookup_expr='gte')
    endDate = django_filters.DateFilter(field_name='out_date', lookup_expr='lte')
    batch_no = django_filters.CharFilter(lookup_expr='icontains')
    department = django_filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = StockOutRecord
        fields = ['recipient']
