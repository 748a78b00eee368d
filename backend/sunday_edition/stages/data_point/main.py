"""Weekly data point: one rotating metric per locale, chosen by ISO week."""

import logging
from datetime import date, datetime

from sunday_edition.models import DataPointType, Locale, WeeklyDataPoint
from sunday_edition.services.completion import CompletionService
from sunday_edition.text import Extracted, ExtractionError, extract_model

from ..shared import currency_for, temperature_unit
from .models import DataPointResult
from .prompts import DATA_POINT_PROMPTS, RESPONSE_FORMAT

logger = logging.getLogger(__name__)

DATA_POINT_ROTATION: tuple[DataPointType, ...] = (
    "real_estate",
    "safety",
    "environment",
    "flaneur_index",
)

DATA_POINT_LABELS: dict[DataPointType, str] = {
    "real_estate": "The Market",
    "safety": "The Safety Index",
    "environment": "The Air We Breathe",
    "flaneur_index": "The Flaneur Index",
}

# The formatter omits the section when the value is exactly this string
DATA_UNAVAILABLE = "Data unavailable this week"
MISSING_VALUE = "Data unavailable"

DATA_POINT_TEMPERATURE = 0.3


def iso_week(now: date | datetime) -> int:
    return now.isocalendar().week


def select_data_point_type(now: date | datetime) -> DataPointType:
    """Rotation slot for the ISO week of ``now``; same week, same type."""
    return DATA_POINT_ROTATION[iso_week(now) % len(DATA_POINT_ROTATION)]


def unavailable_data_point(data_point_type: DataPointType) -> WeeklyDataPoint:
    return WeeklyDataPoint(
        type=data_point_type,
        label=DATA_POINT_LABELS[data_point_type],
        value=DATA_UNAVAILABLE,
        context="",
    )


def build_data_point_prompt(data_point_type: DataPointType, locale: Locale) -> str:
    unit = temperature_unit(locale.country)
    question = DATA_POINT_PROMPTS[data_point_type].format(
        name=locale.name,
        city=locale.city,
        unit=unit,
        unit_example="45°F" if unit == "°F" else "12°C",
        currency=currency_for(locale.country),
    )
    return question + RESPONSE_FORMAT


async def generate_data_point(
    completion: CompletionService, locale: Locale, now: date | datetime
) -> WeeklyDataPoint:
    """Look up this week's metric with a search-grounded completion."""
    data_point_type = select_data_point_type(now)
    prompt = build_data_point_prompt(data_point_type, locale)
    text = await completion.complete(prompt, temperature=DATA_POINT_TEMPERATURE, grounded=True)

    match extract_model(text, "value", DataPointResult):
        case Extracted(value=result):
            return WeeklyDataPoint(
                type=data_point_type,
                label=DATA_POINT_LABELS[data_point_type],
                value=result.value.strip() or MISSING_VALUE,
                context=result.context.strip(),
            )
        case ExtractionError(reason=reason):
            logger.warning(f"{locale.name}: data point ({data_point_type}) output unusable ({reason})")
            return unavailable_data_point(data_point_type)
