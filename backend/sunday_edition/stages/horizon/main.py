"""Horizon: discover, curate and order the coming week's events.

Tier A asks a search-augmented service (X + web) for a free-text event dump,
which a separate completion curates into structured events. Tier B asks a
search-grounded completion to do both in one call. Choosing between the
tiers is the orchestrator's job.
"""

import logging
import re
from datetime import datetime, timezone

from sunday_edition.config import PipelineConfig
from sunday_edition.models import HorizonEvent, Locale
from sunday_edition.services.completion import CompletionService, EventSearchService
from sunday_edition.text import Extracted, ExtractionError, extract_model

from ..shared import coerce_day_format, date_window, time_format_instruction, uses_12h
from .models import EventsResult
from .prompts import (
    CURATION_PROMPT,
    EVENT_SEARCH_PROMPT,
    EVENT_SEARCH_SYSTEM_PROMPT,
    GROUNDED_EVENTS_PROMPT,
)

logger = logging.getLogger(__name__)

SEARCH_TEMPERATURE = 0.5
CURATION_TEMPERATURE = 0.4
GROUNDED_TEMPERATURE = 0.5

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}  # fmt: skip

_MONTH_DAY = re.compile(
    r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+(\d{1,2})\b",
    re.IGNORECASE,
)
_TIME_12H = re.compile(r"\b(\d{1,2})(?::(\d{2}))?\s*([ap])\.?m\b", re.IGNORECASE)
_TIME_24H = re.compile(r"\b(\d{1,2}):(\d{2})\b")


async def hunt_upcoming_events(
    event_search: EventSearchService, locale: Locale, now: datetime
) -> str:
    """Tier A: free-text listing of candidate events for the coming week."""
    from_date, to_date = date_window(now)
    prompt = EVENT_SEARCH_PROMPT.format(
        search_location=locale.search_location, from_date=from_date, to_date=to_date
    )
    system_prompt = EVENT_SEARCH_SYSTEM_PROMPT.format(name=locale.name, city=locale.city)
    raw = await event_search.search(
        prompt, system_prompt=system_prompt, temperature=SEARCH_TEMPERATURE
    )
    logger.info(f"{locale.name}: event search returned {len(raw)} chars")
    return raw


def _parse_events(text: str, locale: Locale, config: PipelineConfig, stage: str) -> list[HorizonEvent]:
    match extract_model(text, "events", EventsResult):
        case Extracted(value=result):
            twelve_hour = uses_12h(locale.country)
            return [
                event.model_copy(update={"day": coerce_day_format(event.day, twelve_hour)})
                for event in result.events[: config.max_events]
            ]
        case ExtractionError(reason=reason):
            logger.warning(f"{locale.name}: {stage} output unusable ({reason})")
            return []


async def curate_events(
    completion: CompletionService,
    raw_events: str,
    locale: Locale,
    config: PipelineConfig,
) -> list[HorizonEvent]:
    """Narrow a Tier A dump to the top events; [] when nothing usable comes back."""
    prompt = CURATION_PROMPT.format(
        name=locale.name,
        city=locale.city,
        max_events=config.max_events,
        raw_events=raw_events,
        time_format=time_format_instruction(locale.country),
    )
    text = await completion.complete(prompt, temperature=CURATION_TEMPERATURE)
    return _parse_events(text, locale, config, "event curation")


async def hunt_events_grounded(
    completion: CompletionService,
    locale: Locale,
    now: datetime,
    config: PipelineConfig,
) -> list[HorizonEvent]:
    """Tier B: one search-grounded call that finds and curates events."""
    from_date, to_date = date_window(now)
    prompt = GROUNDED_EVENTS_PROMPT.format(
        max_events=config.max_events,
        search_location=locale.search_location,
        from_date=from_date,
        to_date=to_date,
        time_format=time_format_instruction(locale.country),
    )
    text = await completion.complete(prompt, temperature=GROUNDED_TEMPERATURE, grounded=True)
    return _parse_events(text, locale, config, "grounded event search")


def parse_event_day_for_sort(day: str, now: datetime) -> float:
    """UTC timestamp for a day string like "Tuesday Feb 10 6pm"; 0 if unparsable.

    The year is taken from ``now``.
    """
    date_match = _MONTH_DAY.search(day)
    if not date_match:
        return 0

    month = MONTHS[date_match.group(1).lower()]
    day_of_month = int(date_match.group(2))
    hour, minute = 0, 0

    rest = day[date_match.end():]
    if time_12h := _TIME_12H.search(rest):
        hour = int(time_12h.group(1)) % 12
        minute = int(time_12h.group(2) or 0)
        if time_12h.group(3).lower() == "p":
            hour += 12
    elif time_24h := _TIME_24H.search(rest):
        hour = int(time_24h.group(1))
        minute = int(time_24h.group(2))

    try:
        return datetime(
            now.year, month, day_of_month, hour, minute, tzinfo=timezone.utc
        ).timestamp()
    except ValueError:
        return 0


def sort_events(events: list[HorizonEvent], now: datetime) -> list[HorizonEvent]:
    """Ascending by parsed day; unparsable days first, ties keep their order."""
    return sorted(events, key=lambda event: parse_event_day_for_sort(event.day, now))
