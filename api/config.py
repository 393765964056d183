"""
Explicit configuration for record listings.

Built once from Django settings when the api app is ready and handed to
every finder, so finders never read settings on their own.
"""
from dataclasses import dataclass

from django.conf import settings

DEFAULT_PERIODS = {
    '7d': 7,
    '14d': 14,
    '30d': 30,
}


@dataclass(frozen=True)
class RecordsConfig:
    default_page: int = 1
    default_per_page: int = 10
    periods: tuple = tuple(DEFAULT_PERIODS.items())

    @classmethod
    def from_settings(cls):
        """Build the configuration from the RECORDS settings block."""
        records = getattr(settings, 'RECORDS', {})
        periods = records.get('PERIODS', DEFAULT_PERIODS)
        return cls(
            default_page=int(records.get('DEFAULT_PAGE', 1)),
            default_per_page=int(records.get('DEFAULT_PER_PAGE', 10)),
            periods=tuple(periods.items()),
        )

    def period_days(self, period):
        """Number of days for a period key like '7d', or None if unknown."""
        return dict(self.periods).get(period)
