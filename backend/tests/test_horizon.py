"""Tests for event curation, day-format coercion and chronological sorting."""

import asyncio
from datetime import datetime, timezone

from fakes import CURATION, GROUNDED_EVENTS, ScriptedCompletion, ScriptedSearch

from sunday_edition.config import PipelineConfig
from sunday_edition.models import HorizonEvent, Locale
from sunday_edition.stages.horizon import (
    curate_events,
    hunt_events_grounded,
    hunt_upcoming_events,
    parse_event_day_for_sort,
    sort_events,
)
from sunday_edition.stages.shared import (
    coerce_day_format,
    currency_for,
    date_window,
    temperature_unit,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

TRIBECA = Locale(id="tribeca", name="Tribeca", city="New York", country="USA")
DAIKANYAMA = Locale(id="daikanyama", name="Daikanyama", city="Tokyo", country="Japan")

FOUR_EVENTS = """```json
{"events": [
  {"day": "Saturday Oct 24 14:00", "name": "Gallery Walk", "whyItMatters": "New shows", "category": "Arts"},
  {"day": "Tuesday Oct 20 7pm", "name": "Community Board", "whyItMatters": "Zoning vote", "category": "Civic"},
  {"day": "Friday Oct 23", "name": "Food Hall Opening", "whyItMatters": "Long awaited", "category": "Food"},
  {"day": "Sunday Oct 25 10am", "name": "Fun Run", "whyItMatters": "Street closures", "category": "Sports"}
]}
```"""


def _utc(*args: int) -> float:
    return datetime(*args, tzinfo=timezone.utc).timestamp()


# ============================================================================
# Sort key parsing
# ============================================================================


def test_parse_12h_time() -> None:
    assert parse_event_day_for_sort("Saturday Feb 14 2pm", NOW) == _utc(2026, 2, 14, 14, 0)


def test_parse_24h_time_with_minutes() -> None:
    assert parse_event_day_for_sort("Friday Sep 25 19:30", NOW) == _utc(2026, 9, 25, 19, 30)


def test_parse_dotted_meridiem() -> None:
    assert parse_event_day_for_sort("Friday Sep 25 7 p.m.", NOW) == _utc(2026, 9, 25, 19, 0)
    assert parse_event_day_for_sort("Friday Sep 25 9:30 A.M.", NOW) == _utc(2026, 9, 25, 9, 30)


def test_parse_midnight_and_noon() -> None:
    assert parse_event_day_for_sort("Monday Oct 19 12am", NOW) == _utc(2026, 10, 19, 0, 0)
    assert parse_event_day_for_sort("Monday Oct 19 12pm", NOW) == _utc(2026, 10, 19, 12, 0)


def test_parse_full_month_name_without_time() -> None:
    assert parse_event_day_for_sort("Saturday February 14", NOW) == _utc(2026, 2, 14)


def test_parse_unparsable_is_zero() -> None:
    assert parse_event_day_for_sort("TBD", NOW) == 0
    assert parse_event_day_for_sort("", NOW) == 0


def test_parse_impossible_date_is_zero() -> None:
    assert parse_event_day_for_sort("Monday Feb 30 2pm", NOW) == 0


def test_sort_events_chronological_with_unparsable_first() -> None:
    events = [
        HorizonEvent(day="Saturday Oct 24 2pm", name="Later"),
        HorizonEvent(day="Date to be announced", name="Unknown"),
        HorizonEvent(day="Tuesday Oct 20 9am", name="Sooner"),
        HorizonEvent(day="Tuesday Oct 20 6pm", name="Evening"),
    ]

    ordered = [event.name for event in sort_events(events, NOW)]

    assert ordered == ["Unknown", "Sooner", "Evening", "Later"]


def test_sort_events_is_stable_for_ties() -> None:
    events = [
        HorizonEvent(day="Friday Oct 23", name="First"),
        HorizonEvent(day="Friday Oct 23", name="Second"),
    ]
    assert [event.name for event in sort_events(events, NOW)] == ["First", "Second"]


# ============================================================================
# Day format coercion
# ============================================================================


def test_coerce_to_24h() -> None:
    assert coerce_day_format("Friday Sep 25 7pm", twelve_hour=False) == "Friday Sep 25 19:00"
    assert coerce_day_format("Friday Sep 25 7:30pm", twelve_hour=False) == "Friday Sep 25 19:30"
    assert coerce_day_format("Friday Sep 25 12am", twelve_hour=False) == "Friday Sep 25 00:00"
    assert coerce_day_format("Friday Sep 25 12pm", twelve_hour=False) == "Friday Sep 25 12:00"


def test_coerce_dotted_meridiem_to_24h() -> None:
    assert coerce_day_format("Friday Sep 25 7 p.m.", twelve_hour=False) == "Friday Sep 25 19:00"
    assert coerce_day_format("Friday Sep 25 10:30 a.m. brunch", twelve_hour=False) == (
        "Friday Sep 25 10:30 brunch"
    )
    assert coerce_day_format("Friday Sep 25 10:30 a.m.", twelve_hour=True) == (
        "Friday Sep 25 10:30 a.m."
    )


def test_coerce_to_12h() -> None:
    assert coerce_day_format("Saturday Feb 14 14:00", twelve_hour=True) == "Saturday Feb 14 2pm"
    assert coerce_day_format("Saturday Feb 14 09:30", twelve_hour=True) == "Saturday Feb 14 9:30am"
    assert coerce_day_format("Saturday Feb 14 00:00", twelve_hour=True) == "Saturday Feb 14 12am"


def test_coerce_leaves_matching_format_alone() -> None:
    assert coerce_day_format("Saturday Feb 14 2pm", twelve_hour=True) == "Saturday Feb 14 2pm"
    assert coerce_day_format("Saturday Feb 14 14:00", twelve_hour=False) == "Saturday Feb 14 14:00"
    assert coerce_day_format("Saturday Feb 14", twelve_hour=False) == "Saturday Feb 14"


# ============================================================================
# Curation
# ============================================================================


def test_curate_events_limits_and_coerces() -> None:
    completion = ScriptedCompletion([(CURATION, FOUR_EVENTS)])

    events = asyncio.run(curate_events(completion, "raw dump", TRIBECA, PipelineConfig()))

    assert len(events) == 3
    assert events[0].day == "Saturday Oct 24 2pm"
    assert events[0].why_it_matters == "New shows"
    assert events[1].day == "Tuesday Oct 20 7pm"
    assert completion.calls[0]["temperature"] == 0.4
    assert completion.calls[0]["grounded"] is False
    assert "raw dump" in completion.calls[0]["prompt"]


def test_curate_events_uses_24h_for_japan() -> None:
    completion = ScriptedCompletion([(CURATION, FOUR_EVENTS)])

    events = asyncio.run(curate_events(completion, "raw dump", DAIKANYAMA, PipelineConfig()))

    assert events[1].day == "Tuesday Oct 20 19:00"
    assert "24-hour" in completion.calls[0]["prompt"]


def test_curate_events_respects_smaller_limit() -> None:
    completion = ScriptedCompletion([(CURATION, FOUR_EVENTS)])
    config = PipelineConfig(max_events=1)

    events = asyncio.run(curate_events(completion, "raw dump", TRIBECA, config))

    assert [event.name for event in events] == ["Gallery Walk"]


def test_curate_events_garbage_returns_empty() -> None:
    completion = ScriptedCompletion([(CURATION, "Sorry, I couldn't find anything.")])

    assert asyncio.run(curate_events(completion, "raw", TRIBECA, PipelineConfig())) == []


def test_hunt_events_grounded_is_grounded() -> None:
    completion = ScriptedCompletion([(GROUNDED_EVENTS, FOUR_EVENTS)])

    events = asyncio.run(hunt_events_grounded(completion, TRIBECA, NOW, PipelineConfig()))

    assert len(events) == 3
    call = completion.calls[0]
    assert call["grounded"] is True
    assert call["temperature"] == 0.5
    assert "October 19" in call["prompt"]
    assert "October 26, 2026" in call["prompt"]


def test_hunt_upcoming_events_uses_search_location() -> None:
    hamptons = Locale(id="hamptons", name="The Hamptons", city="New York", country="USA")
    search = ScriptedSearch("1. Harvest fair, Saturday")

    raw = asyncio.run(hunt_upcoming_events(search, hamptons, NOW))

    assert raw == "1. Harvest fair, Saturday"
    assert "Sag Harbor" in search.calls[0]["prompt"]
    assert "The Hamptons" in search.calls[0]["system_prompt"]


# ============================================================================
# Locale conventions
# ============================================================================


def test_date_window() -> None:
    assert date_window(NOW) == ("October 19", "October 26, 2026")
    assert date_window(datetime(2026, 12, 28, tzinfo=timezone.utc)) == (
        "December 28",
        "January 4, 2027",
    )


def test_currency_and_temperature_unit() -> None:
    assert currency_for("Japan") == "JPY"
    assert currency_for("Atlantis") == "local currency"
    assert temperature_unit("USA") == "°F"
    assert temperature_unit("Sweden") == "°C"
