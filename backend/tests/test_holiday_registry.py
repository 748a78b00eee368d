"""Tests for holiday detection windows and registry ordering."""

from datetime import date, datetime, timezone

import pytest

from sunday_edition.seasonal import (
    HOLIDAYS,
    HolidayDefinition,
    HolidayRegistry,
    UpcomingHoliday,
    detect_upcoming_holiday,
)
from sunday_edition.seasonal.calendar_math import fixed_date


def test_holiday_exactly_seven_days_out_matches() -> None:
    holiday = detect_upcoming_holiday("France", date(2026, 2, 7))
    assert holiday is not None
    assert holiday.name == "Valentine's Day"
    assert holiday.date == date(2026, 2, 14)


def test_holiday_eight_days_out_does_not_match() -> None:
    assert detect_upcoming_holiday("France", date(2026, 2, 6)) is None


def test_holiday_today_matches() -> None:
    holiday = detect_upcoming_holiday("USA", date(2026, 7, 4))
    assert holiday is not None
    assert holiday.name == "Independence Day"


def test_time_of_day_is_ignored() -> None:
    late = datetime(2026, 2, 7, 23, 59, tzinfo=timezone.utc)
    holiday = detect_upcoming_holiday("France", late)
    assert holiday is not None
    assert holiday.name == "Valentine's Day"


def test_country_specific_holiday_wins_over_global() -> None:
    # Valentine's Day (Feb 14) is closer, but Lunar New Year is local to Singapore
    holiday = detect_upcoming_holiday("Singapore", date(2026, 2, 10))
    assert holiday is not None
    assert holiday.name == "Lunar New Year"
    assert holiday.date == date(2026, 2, 17)


def test_country_scope_is_respected() -> None:
    assert detect_upcoming_holiday("Japan", date(2026, 7, 1)) is None
    holiday = detect_upcoming_holiday("Canada", date(2026, 6, 28))
    assert holiday is not None
    assert holiday.name == "Canada Day"


def test_lookup_table_holiday_for_japan() -> None:
    holiday = detect_upcoming_holiday("Japan", date(2026, 9, 19))
    assert holiday is not None
    assert holiday.name == "Tsukimi"
    assert holiday.date == date(2026, 9, 25)


def test_year_outside_lookup_table_is_not_an_error() -> None:
    assert detect_upcoming_holiday("Japan", date(2031, 9, 20)) is None


def test_window_crossing_new_year() -> None:
    holiday = detect_upcoming_holiday("France", date(2026, 12, 30))
    assert holiday is not None
    assert holiday.name == "New Year's Day"
    assert holiday.date == date(2027, 1, 1)


def test_easter_is_detected_everywhere() -> None:
    holiday = detect_upcoming_holiday("Sweden", date(2026, 3, 31))
    assert holiday is not None
    assert holiday.name == "Easter"
    assert holiday.date == date(2026, 4, 5)


def test_country_specific_definitions_precede_global_ones() -> None:
    seen_global = False
    for definition in HOLIDAYS:
        if definition.countries == "all":
            seen_global = True
        else:
            assert not seen_global, definition.name


def test_registry_rejects_country_holiday_after_global() -> None:
    with pytest.raises(ValueError):
        HolidayRegistry(
            [
                HolidayDefinition(name="Global", date_fn=fixed_date(1, 1), countries="all"),
                HolidayDefinition(name="Local", date_fn=fixed_date(1, 2), countries=["USA"]),
            ]
        )


def test_custom_window() -> None:
    registry = HolidayRegistry(HOLIDAYS, window_days=14)
    holiday = registry.detect_upcoming_holiday("France", date(2026, 2, 1))
    assert holiday is not None
    assert holiday.name == "Valentine's Day"


def test_display_date() -> None:
    assert UpcomingHoliday(name="Valentine's Day", date=date(2026, 2, 14)).display_date == (
        "Saturday, February 14"
    )
    assert UpcomingHoliday(name="Tsukimi", date=date(2026, 9, 25)).display_date == (
        "Friday, September 25"
    )
