"""Holiday section: events around a holiday in the coming week, if there is one."""

import logging
from datetime import datetime

from sunday_edition.config import PipelineConfig
from sunday_edition.models import HolidayEvent, HolidaySection, Locale
from sunday_edition.seasonal import HolidayRegistry, UpcomingHoliday
from sunday_edition.services.completion import CompletionService, EventSearchService
from sunday_edition.text import Extracted, ExtractionError, extract_model

from ..shared import coerce_day_format, time_format_instruction, uses_12h
from .models import HolidayEventsResult
from .prompts import (
    FOUND_EVENTS_CONTEXT,
    HOLIDAY_CURATION_PROMPT,
    HOLIDAY_SEARCH_PROMPT,
    HOLIDAY_SEARCH_SYSTEM_PROMPT,
    SEARCH_INSTRUCTION_CONTEXT,
)

logger = logging.getLogger(__name__)

HOLIDAY_TEMPERATURE = 0.5


async def search_holiday_events(
    event_search: EventSearchService, holiday: UpcomingHoliday, locale: Locale
) -> str:
    prompt = HOLIDAY_SEARCH_PROMPT.format(
        holiday=holiday.name, search_location=locale.search_location
    )
    system_prompt = HOLIDAY_SEARCH_SYSTEM_PROMPT.format(
        name=locale.name, city=locale.city, holiday=holiday.name
    )
    return await event_search.search(
        prompt, system_prompt=system_prompt, temperature=HOLIDAY_TEMPERATURE
    )


async def curate_holiday_events(
    completion: CompletionService,
    holiday: UpcomingHoliday,
    raw_events: str | None,
    locale: Locale,
    config: PipelineConfig,
) -> list[HolidayEvent]:
    """Pick the top holiday events; searches itself (grounded) when ``raw_events`` is None."""
    if raw_events:
        search_context = FOUND_EVENTS_CONTEXT.format(raw_events=raw_events)
    else:
        search_context = SEARCH_INSTRUCTION_CONTEXT.format(
            holiday=holiday.name, name=locale.name, city=locale.city
        )
    prompt = HOLIDAY_CURATION_PROMPT.format(
        name=locale.name,
        city=locale.city,
        holiday=holiday.name,
        max_events=config.max_events,
        search_context=search_context,
        time_format=time_format_instruction(locale.country),
    )
    text = await completion.complete(
        prompt, temperature=HOLIDAY_TEMPERATURE, grounded=not raw_events
    )

    match extract_model(text, "events", HolidayEventsResult):
        case Extracted(value=result):
            twelve_hour = uses_12h(locale.country)
            return [
                event.model_copy(update={"day": coerce_day_format(event.day, twelve_hour)})
                for event in result.events[: config.max_events]
            ]
        case ExtractionError(reason=reason):
            logger.warning(f"{locale.name}: holiday curation output unusable ({reason})")
            return []


async def build_holiday_section(
    completion: CompletionService,
    event_search: EventSearchService | None,
    registry: HolidayRegistry,
    locale: Locale,
    now: datetime,
    config: PipelineConfig,
) -> HolidaySection | None:
    """Section for the first holiday within the registry window, or None.

    None also when the holiday is detected but no events are found for it.
    """
    holiday = registry.detect_upcoming_holiday(locale.country, now)
    if holiday is None:
        return None
    logger.info(f"{locale.name}: detected holiday '{holiday.name}' on {holiday.date}")

    raw_events: str | None = None
    if event_search is not None:
        try:
            raw_events = await search_holiday_events(event_search, holiday, locale)
        except Exception as e:
            logger.warning(
                f"{locale.name}: holiday event search failed, curating with grounding: {e}"
            )

    events = await curate_holiday_events(completion, holiday, raw_events, locale, config)
    if not events:
        logger.info(f"{locale.name}: no {holiday.name} events found, skipping section")
        return None

    return HolidaySection(
        holiday_name=holiday.name, date=holiday.display_date, events=events
    )
