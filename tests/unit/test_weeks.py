import pytest
from datetime import date, datetime, timedelta, timezone

from holical.core.weeks import (
    format_date,
    iso_week,
    iso_week_year,
    parse_date,
    week_key,
    week_range,
    weeks_in_year,
)


def _dates(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class TestIsoWeek:
    """ISO-8601 week numbers, especially around year boundaries."""

    def test_known_fixed_points(self):
        assert iso_week(date(2024, 1, 1)) == 1
        assert iso_week_year(date(2024, 1, 1)) == 2024

        assert iso_week(date(2023, 1, 1)) == 52
        assert iso_week_year(date(2023, 1, 1)) == 2022

        assert iso_week(date(2024, 12, 30)) == 1
        assert iso_week_year(date(2024, 12, 30)) == 2025

    def test_week_53(self):
        # 2020 is a long ISO year (starts on a Wednesday, leap year)
        assert week_key(date(2020, 12, 31)) == (2020, 53)
        assert week_key(date(2021, 1, 3)) == (2020, 53)
        assert week_key(date(2021, 1, 4)) == (2021, 1)

    def test_accepts_strings_and_datetimes(self):
        assert iso_week("2024-01-01") == 1
        late_evening = datetime(2024, 12, 29, 23, 59, tzinfo=timezone(timedelta(hours=-10)))
        assert week_key(late_evening) == (2024, 52)

    def test_matches_isocalendar_across_boundaries(self):
        """Every day of 2015-2030 agrees with the standard library calendar."""
        for day in _dates(date(2015, 1, 1), date(2030, 12, 31)):
            iso_year, week, _ = day.isocalendar()
            assert 1 <= iso_week(day) <= 53
            assert week_key(day) == (iso_year, week), day


class TestWeekRange:

    def test_first_week_of_2024(self):
        assert week_range(2024, 1) == (date(2024, 1, 1), date(2024, 1, 7))

    def test_first_week_starting_in_previous_year(self):
        assert week_range(2025, 1) == (date(2024, 12, 30), date(2025, 1, 5))
        assert week_range(2021, 1) == (date(2021, 1, 4), date(2021, 1, 10))

    def test_monday_to_sunday(self):
        for week in range(1, weeks_in_year(2026) + 1):
            start, end = week_range(2026, week)
            assert start.isoweekday() == 1
            assert end.isoweekday() == 7
            assert (end - start).days == 6

    def test_round_trip_contains_date(self):
        for day in _dates(date(2019, 12, 1), date(2021, 2, 1)):
            start, end = week_range(iso_week_year(day), iso_week(day))
            assert start <= day <= end

    def test_matches_fromisocalendar(self):
        for year in range(2000, 2031):
            for week in (1, 26, weeks_in_year(year)):
                start, _ = week_range(year, week)
                assert start == date.fromisocalendar(year, week, 1)

    def test_rejects_missing_weeks(self):
        assert weeks_in_year(2020) == 53
        assert weeks_in_year(2024) == 52

        with pytest.raises(ValueError, match="out of range"):
            week_range(2024, 53)
        with pytest.raises(ValueError, match="out of range"):
            week_range(2024, 0)

    def test_last_representable_week(self):
        # 9999-12-31 is in week (9999, 52), whose Sunday would be 10000-01-02
        assert week_key(date(9999, 12, 31)) == (9999, 52)
        assert week_range(9999, 51) == (date(9999, 12, 20), date(9999, 12, 26))

        with pytest.raises(ValueError, match="ends after"):
            week_range(9999, 52)


class TestDateParsing:

    def test_parse_and_format(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)
        assert parse_date(datetime(2024, 2, 29, 18, 30)) == date(2024, 2, 29)
        assert format_date(date(2024, 3, 5)) == "2024-03-05"

    @pytest.mark.parametrize("value", [
        "2024-1-1",
        "20240101",
        "2023-02-29",
        "2024-01-01T00:00:00Z",
        "2024-01-01\n",
        "٢٠٢٤-01-01",
        "２０２４-０１-０１",
        "",
        20240101,
        None,
    ])
    def test_rejects_malformed_dates(self, value):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date(value)
