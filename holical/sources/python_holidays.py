import logging
from datetime import date
from typing import List, Tuple

import holidays

from ..core.holidays import HolidaySource
from ..core.registry import register_source

logger = logging.getLogger(__name__)


@register_source("python-holidays")
class PythonHolidaysSource(HolidaySource):
    """Public holidays from the `holidays` package."""

    def fetch(self, country_code: str, year: int) -> List[Tuple[date, str]]:
        try:
            calendar = holidays.country_holidays(country_code, years=year)
        except NotImplementedError:
            logger.warning("Unsupported country code: %s", country_code)
            return []

        return sorted(calendar.items())
