"""Core HOLICAL components - week engine and holiday sources."""

from .aggregation import HolidayRecord, WeekBucket, WeekIntensity, WeekKey, aggregate_holidays
from .holidays import HolidaySource
from .registry import SourceRegistry

__all__ = [
    "HolidayRecord",
    "WeekBucket",
    "WeekIntensity",
    "WeekKey",
    "aggregate_holidays",
    "HolidaySource",
    "SourceRegistry",
]
