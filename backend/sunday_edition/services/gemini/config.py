"""Configuration for the Gemini completion client."""

from pydantic import BaseModel, Field

from sunday_edition.llm_providers import GeminiModel


class GeminiConfig(BaseModel):
    """Configuration for the Gemini completion client."""

    model_name: str = GeminiModel.GEMINI_3_PRO.value
    timeout_seconds: float = 120.0

    # Waits before each retry of a rate-limited (429) or 5xx response
    retry_delays_seconds: list[float] = Field(default_factory=lambda: [2.0, 5.0, 15.0])
