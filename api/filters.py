"""
Base filter set shared by record finders.

Subclasses declare which columns free-text search covers and which date
column the period filter applies to.
"""
from datetime import timedelta

from django.db.models import Q
from django.utils import timezone
from django_filters import rest_framework as django_filters

from .config import RecordsConfig


class NumberInFilter(django_filters.BaseInFilter, django_filters.NumberFilter):
    """Comma separated list of ids: ?sender_ids=1,2,3"""


class RecordFilterSet(django_filters.FilterSet):
    """
    Free-text search and period filtering over a record model.

    Class attributes (override in subclass):
    - search_fields: columns matched case-insensitively by `query`
    - period_field: date column the `period` filter applies to
    """
    search_fields = ()
    period_field = 'created_at'

    query = django_filters.CharFilter(method='filter_query')
    period = django_filters.ChoiceFilter(method='filter_period', choices=[])

    def __init__(self, data=None, queryset=None, *, config=None, **kwargs):
        super().__init__(data=data, queryset=queryset, **kwargs)
        self.config = config or RecordsConfig()
        self.filters['period'].extra['choices'] = [
            (key, key) for key, _ in self.config.periods
        ]

    def filter_query(self, queryset, name, value):
        """Substring match on any of search_fields."""
        search_q = Q()
        for field_name in self.search_fields:
            search_q |= Q(**{f'{field_name}__icontains': value})
        return queryset.filter(search_q)

    def filter_period(self, queryset, name, value):
        """Rows dated from the start of the day N days ago."""
        days = self.config.period_days(value)
        start_of_period = (timezone.localtime() - timedelta(days=days)).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        return queryset.filter(**{f'{self.period_field}__gte': start_of_period})
