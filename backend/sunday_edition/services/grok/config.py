"""Configuration for the Grok Responses API client."""

from pydantic import BaseModel, Field

from sunday_edition.llm_providers import GrokModel


class GrokConfig(BaseModel):
    """Configuration for the Grok Responses API client."""

    base_url: str = "https://api.x.ai/v1"
    model_name: str = GrokModel.GROK_4_1_FAST.value
    timeout_seconds: float = 120.0
    max_retries: int = 3

    # Server-side search tools the model may call
    search_tools: list[str] = Field(default_factory=lambda: ["x_search", "web_search"])
