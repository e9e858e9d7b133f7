from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..core.aggregation import HolidayRecord, WeekBucket, WeekIntensity
from ..core.weeks import format_date


class HolidayOut(BaseModel):
    date: str = Field(..., description="Holiday date (YYYY-MM-DD)")
    name: str

    @classmethod
    def from_record(cls, record: HolidayRecord) -> "HolidayOut":
        return cls(date=format_date(record.date), name=record.name)


class WeekBucketOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week_start: str = Field(..., alias="weekStart", description="Monday of the ISO week")
    week_end: str = Field(..., alias="weekEnd", description="Sunday of the ISO week")
    count: int
    iso_year: int = Field(..., alias="isoYear")
    week: int
    intensity: WeekIntensity

    @classmethod
    def from_bucket(cls, bucket: WeekBucket) -> "WeekBucketOut":
        return cls(
            week_start=format_date(bucket.start_date),
            week_end=format_date(bucket.end_date),
            count=bucket.count,
            iso_year=bucket.iso_year,
            week=bucket.week,
            intensity=bucket.intensity,
        )


class WeeksRequest(BaseModel):
    holidays: List[HolidayRecord] = Field(default_factory=list, description="Holidays to group by ISO week")


class CountryInfo(BaseModel):
    code: str
    name: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = "0.1.0"
    sources_available: int = 0
