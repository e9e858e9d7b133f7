import datetime
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .weeks import parse_date, week_key, week_range


class WeekIntensity(str, Enum):
    """Presentation variant of a highlighted week."""
    SINGLE = "single"
    MULTIPLE = "multiple"


class WeekKey(NamedTuple):
    iso_year: int
    week: int


class HolidayRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime.date = Field(..., description="Holiday date (YYYY-MM-DD)")
    name: str = Field(..., description="Holiday name")

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        """Strip time-of-day and reject anything that is not YYYY-MM-DD.

        Dates whose ISO week runs past the last representable date are
        rejected too, since they cannot be bucketed.
        """
        day = parse_date(v)
        week_range(*week_key(day))
        return day


class WeekBucket(BaseModel):
    model_config = ConfigDict(frozen=True)

    iso_year: int
    week: int = Field(..., ge=1, le=53)
    count: int = Field(..., ge=1)
    start_date: datetime.date
    end_date: datetime.date
    intensity: WeekIntensity

    @property
    def week_key(self) -> WeekKey:
        return WeekKey(self.iso_year, self.week)

    def contains(self, day: datetime.date) -> bool:
        return self.start_date <= day <= self.end_date


def week_intensity(count: int) -> WeekIntensity:
    """Map a holiday count to its highlight variant."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return WeekIntensity.SINGLE if count == 1 else WeekIntensity.MULTIPLE


def count_by_week(records: Iterable[HolidayRecord]) -> Dict[WeekKey, int]:
    """Count holidays per ISO week, keyed by (ISO week-year, week).

    Keys are sorted ascending so iteration order is deterministic.
    """
    counts = Counter(WeekKey(*week_key(record.date)) for record in records)
    return dict(sorted(counts.items()))


def aggregate_holidays(records: Iterable[HolidayRecord]) -> List[WeekBucket]:
    """Group holidays into week buckets with their Monday..Sunday range.

    Only weeks containing at least one holiday are returned, ordered by
    week key. An empty input yields an empty list.
    """
    buckets = []
    for key, count in count_by_week(records).items():
        start, end = week_range(key.iso_year, key.week)
        buckets.append(WeekBucket(
            iso_year=key.iso_year,
            week=key.week,
            count=count,
            start_date=start,
            end_date=end,
            intensity=week_intensity(count),
        ))
    return buckets
