"""Data models for locales, source articles and the weekly brief aggregate.

Brief models serialize with camelCase aliases (``whyItMatters``,
``rearviewNarrative``) because that is the shape the completion prompts ask
for and the shape downstream publishing consumes. Python code uses the
snake_case field names.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Locales whose name alone makes a poor search query
SEARCH_LOCATION_OVERRIDES: dict[str, str] = {
    "The Hamptons": "The Hamptons, East Hampton, Southampton, Sag Harbor, and Montauk, New York",
    "Nantucket": "Nantucket Island, Massachusetts",
    "Martha's Vineyard": "Martha's Vineyard, Massachusetts",
}


# ============================================================================
# Locales and source articles
# ============================================================================


class Locale(BaseModel):
    """A neighborhood a brief is generated for."""

    id: str
    name: str
    city: str
    country: str
    components: list[str] = Field(
        default_factory=list,
        description="Member locale ids when this locale merges several neighborhoods",
    )
    timezone: str = "UTC"

    def query_ids(self) -> list[str]:
        """Locale ids whose articles belong to this locale's week."""
        return [self.id, *(c for c in self.components if c != self.id)]

    @property
    def search_location(self) -> str:
        """Location phrase for search-backed prompts."""
        override = SEARCH_LOCATION_OVERRIDES.get(self.name)
        if override:
            return override
        return f"{self.name}, {self.city}, {self.country}"


ArticleStatus = Literal["draft", "published", "archived"]


class Article(BaseModel):
    """A published news item from the article datastore."""

    headline: str
    body: str = ""
    category_label: str | None = None
    published_at: datetime
    status: ArticleStatus = "published"


# ============================================================================
# Brief sections
# ============================================================================


class BriefModel(BaseModel):
    """Base for brief models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RearviewStory(BriefModel):
    headline: str
    significance: str = ""


class HorizonEvent(BriefModel):
    day: str = Field(description='Date and time, e.g. "Saturday Feb 14 2pm"')
    name: str
    why_it_matters: str = ""
    category: str = ""


class HolidayEvent(BriefModel):
    name: str
    day: str
    description: str = ""


class HolidaySection(BriefModel):
    holiday_name: str
    date: str = Field(description='Display date, e.g. "Saturday, February 14"')
    events: list[HolidayEvent] = Field(default_factory=list, max_length=3)


DataPointType = Literal["real_estate", "safety", "environment", "flaneur_index"]


class WeeklyDataPoint(BriefModel):
    type: DataPointType
    label: str
    value: str
    context: str = ""


class WeeklyBriefContent(BriefModel):
    """One locale's Sunday Edition."""

    rearview_narrative: str
    rearview_stories: list[RearviewStory] = Field(default_factory=list, max_length=3)
    horizon_events: list[HorizonEvent] = Field(default_factory=list, max_length=3)
    data_point: WeeklyDataPoint
    holiday_section: HolidaySection | None = None
