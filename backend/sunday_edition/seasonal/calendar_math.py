"""Pure date algorithms for holiday detection.

Weekdays follow the 0=Sunday..6=Saturday convention used throughout the
holiday registry, not Python's Monday-first ``date.weekday()``.
"""

import calendar
from datetime import date, timedelta
from typing import Callable, Mapping, Protocol

# Returned for years a lookup calendar does not cover. Far enough in the past
# that it never falls inside a live detection window.
UNKNOWN_DATE = date(1970, 1, 1)

DateFn = Callable[[int], date]


def sunday_based_weekday(d: date) -> int:
    """Weekday of ``d`` with 0=Sunday..6=Saturday."""
    return (d.weekday() + 1) % 7


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (Meeus/Jones/Butcher algorithm)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Date of the n-th (1-based) ``weekday`` in ``month``."""
    first = date(year, month, 1)
    offset = (weekday - sunday_based_weekday(first)) % 7
    return first + timedelta(days=offset + (n - 1) * 7)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Date of the last ``weekday`` in ``month``."""
    last = date(year, month, calendar.monthrange(year, month)[1])
    offset = (sunday_based_weekday(last) - weekday) % 7
    return last - timedelta(days=offset)


def first_weekday_on_or_after(year: int, month: int, day: int, weekday: int) -> date:
    """First ``weekday`` falling on or after the given date (e.g. Midsommar Eve)."""
    start = date(year, month, day)
    offset = (weekday - sunday_based_weekday(start)) % 7
    return start + timedelta(days=offset)


def fixed_date(month: int, day: int) -> DateFn:
    """Date function for a holiday on the same calendar day every year."""

    def _date_for(year: int) -> date:
        return date(year, month, day)

    return _date_for


class CalendarProvider(Protocol):
    """A calendar that may or may not know a holiday's date for a given year."""

    def date_for(self, year: int) -> date | None: ...


class LookupCalendar:
    """Hand-maintained ``{year: (month, day)}`` table for non-arithmetic calendars."""

    def __init__(self, table: Mapping[int, tuple[int, int]]):
        self._table = dict(table)

    def date_for(self, year: int) -> date | None:
        entry = self._table.get(year)
        if entry is None:
            return None
        month, day = entry
        return date(year, month, day)

    @property
    def years(self) -> list[int]:
        return sorted(self._table)


def from_provider(provider: CalendarProvider) -> DateFn:
    """Adapt a CalendarProvider to a date function that never fails.

    Unknown years map to ``UNKNOWN_DATE``, which callers treat as "do not alert".
    """

    def _date_for(year: int) -> date:
        return provider.date_for(year) or UNKNOWN_DATE

    return _date_for


def from_lookup(table: Mapping[int, tuple[int, int]]) -> DateFn:
    """Date function backed by a year lookup table."""
    return from_provider(LookupCalendar(table))
