"""Country-scoped holiday registry with a 7-day lookahead."""

import logging
from datetime import date, datetime, timedelta
from typing import Literal

from pydantic import BaseModel

from . import lookup_tables
from .calendar_math import (
    UNKNOWN_DATE,
    DateFn,
    easter_sunday,
    first_weekday_on_or_after,
    fixed_date,
    from_lookup,
    last_weekday_of_month,
    nth_weekday_of_month,
)

logger = logging.getLogger(__name__)

ALL_COUNTRIES = "all"

MONDAY = 1
THURSDAY = 4
FRIDAY = 5


class HolidayDefinition(BaseModel):
    """A named holiday, how to date it, and where it is observed."""

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    name: str
    date_fn: DateFn
    countries: list[str] | Literal["all"]

    def applies_to(self, country: str) -> bool:
        return self.countries == ALL_COUNTRIES or country in self.countries


class UpcomingHoliday(BaseModel):
    """A holiday detected inside the lookahead window."""

    name: str
    date: date

    @property
    def display_date(self) -> str:
        """e.g. "Friday, September 25"."""
        return f"{self.date:%A}, {self.date:%B} {self.date.day}"


class HolidayRegistry:
    """Ordered holiday definitions; the first match in the window wins.

    Country-specific definitions must precede the globally applicable ones so
    a locally meaningful holiday beats a generic date in the same week.
    """

    def __init__(self, definitions: list[HolidayDefinition], window_days: int = 7):
        seen_global = False
        for definition in definitions:
            if definition.countries == ALL_COUNTRIES:
                seen_global = True
            elif seen_global:
                raise ValueError(
                    f"Country-specific holiday '{definition.name}' is listed after a "
                    "globally applicable one"
                )
        self.definitions = list(definitions)
        self.window_days = window_days

    def detect_upcoming_holiday(
        self, country: str, now: date | datetime
    ) -> UpcomingHoliday | None:
        """First holiday for ``country`` within [now, now + window] (dates only)."""
        today = now.date() if isinstance(now, datetime) else now
        end = today + timedelta(days=self.window_days)
        years = sorted({today.year, end.year})

        for definition in self.definitions:
            if not definition.applies_to(country):
                continue
            for year in years:
                holiday_date = definition.date_fn(year)
                if holiday_date == UNKNOWN_DATE:
                    logger.debug(f"No {year} date known for {definition.name}")
                    continue
                if today <= holiday_date <= end:
                    return UpcomingHoliday(name=definition.name, date=holiday_date)
        return None


HOLIDAYS: list[HolidayDefinition] = [
    # Country-specific
    HolidayDefinition(
        name="St. Patrick's Day",
        date_fn=fixed_date(3, 17),
        countries=["USA", "Ireland", "UK", "Canada", "Australia", "New Zealand"],
    ),
    HolidayDefinition(name="Cinco de Mayo", date_fn=fixed_date(5, 5), countries=["USA"]),
    HolidayDefinition(
        name="Memorial Day",
        date_fn=lambda y: last_weekday_of_month(y, 5, MONDAY),
        countries=["USA"],
    ),
    HolidayDefinition(name="Canada Day", date_fn=fixed_date(7, 1), countries=["Canada"]),
    HolidayDefinition(name="Independence Day", date_fn=fixed_date(7, 4), countries=["USA"]),
    HolidayDefinition(name="Bastille Day", date_fn=fixed_date(7, 14), countries=["France"]),
    HolidayDefinition(name="National Day", date_fn=fixed_date(8, 9), countries=["Singapore"]),
    HolidayDefinition(
        name="Halloween",
        date_fn=fixed_date(10, 31),
        countries=["USA", "UK", "Ireland", "Canada", "Australia", "New Zealand"],
    ),
    HolidayDefinition(name="Guy Fawkes Night", date_fn=fixed_date(11, 5), countries=["UK"]),
    HolidayDefinition(
        name="Thanksgiving",
        date_fn=lambda y: nth_weekday_of_month(y, 11, THURSDAY, 4),
        countries=["USA"],
    ),
    HolidayDefinition(
        name="Midsommar",
        date_fn=lambda y: first_weekday_on_or_after(y, 6, 19, FRIDAY),
        countries=["Sweden"],
    ),
    HolidayDefinition(name="Australia Day", date_fn=fixed_date(1, 26), countries=["Australia"]),
    HolidayDefinition(
        name="ANZAC Day", date_fn=fixed_date(4, 25), countries=["Australia", "New Zealand"]
    ),
    HolidayDefinition(
        name="Labor Day",
        date_fn=lambda y: nth_weekday_of_month(y, 9, MONDAY, 1),
        countries=["USA"],
    ),
    HolidayDefinition(
        name="Lunar New Year",
        date_fn=from_lookup(lookup_tables.LUNAR_NEW_YEAR),
        countries=["Singapore", "Hong Kong", "China", "Taiwan", "Vietnam", "South Korea", "Malaysia"],
    ),
    HolidayDefinition(
        name="Holi", date_fn=from_lookup(lookup_tables.HOLI), countries=["India"]
    ),
    HolidayDefinition(
        name="Eid al-Fitr",
        date_fn=from_lookup(lookup_tables.EID_AL_FITR),
        countries=["UAE", "Saudi Arabia", "Qatar", "Turkey", "Egypt", "Indonesia", "Malaysia"],
    ),
    HolidayDefinition(
        name="Rosh Hashanah",
        date_fn=from_lookup(lookup_tables.ROSH_HASHANAH),
        countries=["Israel"],
    ),
    HolidayDefinition(
        name="Hanukkah", date_fn=from_lookup(lookup_tables.HANUKKAH), countries=["Israel"]
    ),
    HolidayDefinition(
        name="Diwali",
        date_fn=from_lookup(lookup_tables.DIWALI),
        countries=["India", "Singapore", "Malaysia"],
    ),
    HolidayDefinition(
        name="Tsukimi", date_fn=from_lookup(lookup_tables.MID_AUTUMN), countries=["Japan"]
    ),
    HolidayDefinition(
        name="Mid-Autumn Festival",
        date_fn=from_lookup(lookup_tables.MID_AUTUMN),
        countries=["Singapore", "Hong Kong", "China", "Taiwan", "Vietnam"],
    ),
    HolidayDefinition(name="Obon", date_fn=fixed_date(8, 13), countries=["Japan"]),
    # Globally applicable
    HolidayDefinition(name="New Year's Day", date_fn=fixed_date(1, 1), countries="all"),
    HolidayDefinition(name="Valentine's Day", date_fn=fixed_date(2, 14), countries="all"),
    HolidayDefinition(name="Easter", date_fn=easter_sunday, countries="all"),
    HolidayDefinition(name="Christmas", date_fn=fixed_date(12, 25), countries="all"),
    HolidayDefinition(name="New Year's Eve", date_fn=fixed_date(12, 31), countries="all"),
]

DEFAULT_REGISTRY = HolidayRegistry(HOLIDAYS)


def detect_upcoming_holiday(
    country: str,
    now: date | datetime,
    registry: HolidayRegistry | None = None,
) -> UpcomingHoliday | None:
    """Detect a holiday for ``country`` within the next 7 days of ``now``."""
    return (registry or DEFAULT_REGISTRY).detect_upcoming_holiday(country, now)
