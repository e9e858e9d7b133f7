from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from .models import CountryInfo, ErrorResponse, HealthResponse, HolidayOut, WeekBucketOut, WeeksRequest
from ..config import settings
from ..core.aggregation import HolidayRecord, aggregate_holidays
from ..core.registry import SourceRegistry, get_holidays

router = APIRouter()

NO_HOLIDAYS_ERROR = "Invalid country code or no holidays found"


def _lookup_holidays(country: Optional[str], year: Optional[int]) -> List[HolidayRecord]:
    country = country or settings.default_country
    year = year or date.today().year
    try:
        return get_holidays(country, year)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/", response_model=HealthResponse)
async def health_check():
    return HealthResponse(sources_available=len(SourceRegistry.list_sources()))


@router.get("/api/countries", response_model=List[CountryInfo])
async def list_countries():
    return [CountryInfo(code=code, name=name) for code, name in settings.countries.items()]


@router.get(
    "/api/holidays",
    response_model=List[HolidayOut],
    responses={400: {"model": ErrorResponse}},
)
async def list_holidays(
    country: Optional[str] = Query(default=None, description="ISO country code, defaults to US"),
    year: Optional[int] = Query(default=None, ge=1900, le=2100, description="Defaults to the current year"),
):
    records = _lookup_holidays(country, year)
    if not records:
        return JSONResponse(status_code=400, content={"error": NO_HOLIDAYS_ERROR})
    return [HolidayOut.from_record(record) for record in records]


@router.get("/api/holidays/weeks", response_model=List[WeekBucketOut])
async def list_holiday_weeks(
    country: Optional[str] = Query(default=None, description="ISO country code, defaults to US"),
    year: Optional[int] = Query(default=None, ge=1900, le=2100, description="Defaults to the current year"),
):
    # No holidays is a valid outcome here: no weeks to highlight
    records = _lookup_holidays(country, year)
    return [WeekBucketOut.from_bucket(bucket) for bucket in aggregate_holidays(records)]


@router.post("/api/weeks", response_model=List[WeekBucketOut])
async def bucket_weeks(request: WeeksRequest):
    return [WeekBucketOut.from_bucket(bucket) for bucket in aggregate_holidays(request.holidays)]
