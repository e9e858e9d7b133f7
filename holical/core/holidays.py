"""Holiday source interface.

A holiday source turns a country code and a year into dated holiday records.
Lookups that find nothing (unknown country, no data for the year) are not
errors: they yield an empty list.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List, Tuple

from .aggregation import HolidayRecord

logger = logging.getLogger(__name__)


def normalize_country_code(country_code: str) -> str:
    """Country codes are passed through, only trimmed and upper-cased."""
    return (country_code or "").strip().upper()


class HolidaySource(ABC):
    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def fetch(self, country_code: str, year: int) -> Iterable[Tuple[date, str]]:
        """Return raw (date, name) pairs, or nothing when there is no data."""
        pass

    def get_holidays(self, country_code: str, year: int) -> List[HolidayRecord]:
        country_code = normalize_country_code(country_code)
        if not country_code:
            logger.warning("Empty country code, no holidays for %s", year)
            return []

        records = [
            HolidayRecord(date=day, name=holiday_name)
            for day, holiday_name in self.fetch(country_code, year)
        ]
        records.sort(key=lambda record: (record.date, record.name))

        if records:
            logger.info("Holidays for %s in %s: %d found via %s",
                        country_code, year, len(records), self.name)
        else:
            logger.warning("No holidays for %s in %s via %s", country_code, year, self.name)
        return records
