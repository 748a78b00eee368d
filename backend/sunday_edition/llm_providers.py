"""Model enums for model selection and hotswapping.

Gemini models back every completion stage (significance filter, synthesis,
curation, data point); Grok backs Tier A event search.
"""

from enum import StrEnum


class GeminiModel(StrEnum):
    """Gemini models available via the Generative Language API."""

    GEMINI_3_PRO = "gemini-3-pro-preview"
    GEMINI_3_FLASH = "gemini-3-flash-preview"


class GrokModel(StrEnum):
    """xAI Grok models available via the Responses API."""

    GROK_4_1_FAST = "grok-4-1-fast"


# =============================================================================
# Helper Functions
# =============================================================================


def get_model_string(model: GeminiModel | str) -> str:
    """Get the pydantic-ai model string for a Gemini model.

    Uses the 'google-gla:' prefix (Generative Language API), which supports
    the built-in WebSearchTool used for search grounding. Plain strings are
    treated as Gemini model names so config values can name newer models.
    """
    name = model.value if isinstance(model, GeminiModel) else model
    if ":" in name:
        return name
    return f"google-gla:{name}"
