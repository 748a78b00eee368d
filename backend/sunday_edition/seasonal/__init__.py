"""Calendar math and holiday detection for the seasonal section."""

from .calendar_math import (
    UNKNOWN_DATE,
    CalendarProvider,
    LookupCalendar,
    easter_sunday,
    from_lookup,
    from_provider,
    last_weekday_of_month,
    nth_weekday_of_month,
)
from .registry import (
    DEFAULT_REGISTRY,
    HOLIDAYS,
    HolidayDefinition,
    HolidayRegistry,
    UpcomingHoliday,
    detect_upcoming_holiday,
)

__all__ = [
    "UNKNOWN_DATE",
    "CalendarProvider",
    "LookupCalendar",
    "easter_sunday",
    "from_lookup",
    "from_provider",
    "last_weekday_of_month",
    "nth_weekday_of_month",
    "DEFAULT_REGISTRY",
    "HOLIDAYS",
    "HolidayDefinition",
    "HolidayRegistry",
    "UpcomingHoliday",
    "detect_upcoming_holiday",
]
