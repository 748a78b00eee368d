"""Grok (xAI) Responses API integration for social and web event search."""

from .client import GrokClient
from .config import GrokConfig
from .exceptions import (
    GrokAPIError,
    GrokAuthError,
    GrokRateLimitError,
    GrokServerError,
    GrokTimeoutError,
)
from .models import GrokResponse

__all__ = [
    "GrokClient",
    "GrokConfig",
    "GrokAPIError",
    "GrokAuthError",
    "GrokRateLimitError",
    "GrokServerError",
    "GrokTimeoutError",
    "GrokResponse",
]
