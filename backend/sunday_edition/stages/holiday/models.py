"""Structured output parsed from holiday curation."""

from pydantic import BaseModel

from sunday_edition.models import HolidayEvent


class HolidayEventsResult(BaseModel):
    events: list[HolidayEvent]
