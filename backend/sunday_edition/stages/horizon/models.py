"""Structured outputs parsed from Horizon completions."""

from pydantic import BaseModel

from sunday_edition.models import HorizonEvent


class EventsResult(BaseModel):
    """Payload of event curation: ``{"events": [...]}``."""

    events: list[HorizonEvent]
