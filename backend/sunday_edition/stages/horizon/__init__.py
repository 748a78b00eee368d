"""Horizon section: the coming week's events."""

from .main import (
    curate_events,
    hunt_events_grounded,
    hunt_upcoming_events,
    parse_event_day_for_sort,
    sort_events,
)

__all__ = [
    "curate_events",
    "hunt_events_grounded",
    "hunt_upcoming_events",
    "parse_event_day_for_sort",
    "sort_events",
]
