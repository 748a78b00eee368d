"""Gemini text completion via pydantic-ai."""

from .client import GeminiClient
from .config import GeminiConfig
from .exceptions import GeminiAPIError, GeminiConfigError, GeminiTimeoutError

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiAPIError",
    "GeminiConfigError",
    "GeminiTimeoutError",
]
