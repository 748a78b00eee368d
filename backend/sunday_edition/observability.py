"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire

from sunday_edition import __version__
from sunday_edition.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire with instrumentation for the brief pipeline.

    Call once at startup, before any completion call runs. Instruments:
    - PydanticAI agents (Gemini completion stages)
    - HTTPX clients (Grok Responses API)
    - Python logging (bridges to Logfire)

    Args:
        settings: Application settings containing Logfire token

    Returns:
        True if Logfire was configured, False if disabled or it failed.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="sunday-edition",
            service_version=__version__,
        )

        logfire.instrument_pydantic_ai()
        logfire.instrument_httpx()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("✓ Logfire cloud tracking initialized")
        return True

    except Exception as e:
        # Observability is optional; the run continues without it
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
