"""Rearview section: the past week's significant stories."""

from .main import (
    build_story_context,
    headlines_match,
    editorial_synthesis,
    find_source_article,
    quiet_week_narrative,
    significance_filter,
    synthesis_fallback,
)

__all__ = [
    "build_story_context",
    "headlines_match",
    "editorial_synthesis",
    "find_source_article",
    "quiet_week_narrative",
    "significance_filter",
    "synthesis_fallback",
]
