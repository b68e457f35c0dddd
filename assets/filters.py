"""
Assets — Filters

django-filter FilterSet for the asset list. All filters are AND-ed.

@file assets/filters.py
"""

import django_filters
from django.db.models import Q

from .models import Asset


class AssetFilter(django_filters.FilterSet):
    code = django_filters.CharFilter(field_name='code', lookup_expr='icontains')
    keyword = django_filters.CharFilter(method='filter_keyword')
    type = django_filters.CharFilter(field_name='type', lookup_expr='exact')
    status = django_filters.ChoiceFilter(choices=Asset.StatusChoices.choices)
    department = django_filters.CharFilter(method='filter_department')

    class Meta:
        model = Asset
        fields = ['code', 'keyword', 'type', 'status', 'department']

    def filter_keyword(self, queryset, name, value):
        return queryset.filter(Q(name__icontains=value) | Q(code__icontains=value))

    def filter_department(self, queryset, name, value):
        # Matches the asset's own department or its current stock-out batch.
        return queryset.filter(
            Q(department__icontains=value) | Q(last_stock_out__department__icontains=value),
        )
