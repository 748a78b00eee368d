"""Custom exceptions for the Gemini completion service."""


class GeminiAPIError(Exception):
    """Base exception for Gemini API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GeminiTimeoutError(GeminiAPIError):
    """Completion did not finish within the configured timeout."""

    pass


class GeminiConfigError(GeminiAPIError):
    """No API key or model configured."""

    pass
