"""Holiday ("That Time of Year") section."""

from .main import build_holiday_section, curate_holiday_events, search_holiday_events

__all__ = ["build_holiday_section", "curate_holiday_events", "search_holiday_events"]
