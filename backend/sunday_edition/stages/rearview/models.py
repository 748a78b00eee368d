"""Structured outputs parsed from Rearview completions."""

from pydantic import BaseModel

from sunday_edition.models import RearviewStory


class SignificanceResult(BaseModel):
    """Payload of the significance filter: ``{"stories": [...]}``."""

    stories: list[RearviewStory]
