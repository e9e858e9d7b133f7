"""ISO-8601 week calculations.

All functions operate on calendar dates (year, month, day) only, so results
never depend on the local timezone of the caller.
"""

import re
from datetime import date, datetime, timedelta
from typing import Tuple, Union

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DateLike = Union[date, datetime, str]


def parse_date(value: DateLike) -> date:
    """Normalize a date-like value to a plain calendar date.

    Accepts ``date``, ``datetime`` (time-of-day is dropped) or a strict
    ``YYYY-MM-DD`` string. Anything else raises ``ValueError``.
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not _DATE_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid date '{value}': expected YYYY-MM-DD")
        try:
            return datetime.strptime(value, DATE_FORMAT).date()
        except ValueError as e:
            raise ValueError(f"Invalid date '{value}': {e}") from e
    raise ValueError(f"Invalid date {value!r}: expected YYYY-MM-DD string or date")


def format_date(value: date) -> str:
    """Render a date as ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)


def _week_thursday(value: date) -> date:
    # ISO week N always contains its Thursday; Monday=1 .. Sunday=7
    return value + timedelta(days=4 - value.isoweekday())


def iso_week(value: DateLike) -> int:
    """Return the ISO-8601 week number (1-53) of a date."""
    thursday = _week_thursday(parse_date(value))
    year_start = date(thursday.year, 1, 1)
    return (thursday - year_start).days // 7 + 1


def iso_week_year(value: DateLike) -> int:
    """Return the ISO week-year, which can differ from the calendar year."""
    return _week_thursday(parse_date(value)).year


def week_key(value: DateLike) -> Tuple[int, int]:
    """Return ``(iso_year, week)`` for a date."""
    day = parse_date(value)
    return iso_week_year(day), iso_week(day)


def weeks_in_year(iso_year: int) -> int:
    """Number of ISO weeks (52 or 53) in an ISO week-year."""
    # December 28th is always in the last week of its ISO year
    return iso_week(date(iso_year, 12, 28))


def week_range(iso_year: int, week: int) -> Tuple[date, date]:
    """Return the Monday and Sunday of an ISO week.

    Args:
        iso_year: ISO week-year
        week: ISO week number within that year

    Raises:
        ValueError: if the week does not exist in that ISO year, or ends
            after the last representable date
    """
    last_week = weeks_in_year(iso_year)
    if not 1 <= week <= last_week:
        raise ValueError(f"Week {week} out of range for ISO year {iso_year} (1-{last_week})")

    # January 4th always falls in ISO week 1
    jan4 = date(iso_year, 1, 4)
    week1_monday = jan4 - timedelta(days=jan4.isoweekday() - 1)

    start = week1_monday + timedelta(weeks=week - 1)
    try:
        end = start + timedelta(days=6)
    except OverflowError as e:
        raise ValueError(f"Week {week} of ISO year {iso_year} ends after {date.max}") from e
    return start, end
