"""HOLICAL - public holiday calendar backend with ISO week bucketing."""

__version__ = "0.1.0"
__description__ = "Public holidays per country, grouped into ISO weeks"

from .core.aggregation import HolidayRecord, WeekBucket, aggregate_holidays
from .core.weeks import iso_week, iso_week_year, week_range

__all__ = [
    "HolidayRecord",
    "WeekBucket",
    "aggregate_holidays",
    "iso_week",
    "iso_week_year",
    "week_range",
]
