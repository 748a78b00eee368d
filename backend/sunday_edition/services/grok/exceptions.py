"""Custom exceptions for the Grok (xAI) search service."""


class GrokAPIError(Exception):
    """Base exception for Grok API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GrokAuthError(GrokAPIError):
    """Authentication failed (401/403)."""

    pass


class GrokRateLimitError(GrokAPIError):
    """Rate limit exceeded (429) after all retries."""

    pass


class GrokServerError(GrokAPIError):
    """Server-side error (5xx) after all retries."""

    pass


class GrokTimeoutError(GrokAPIError):
    """Request timed out after all retries."""

    pass
