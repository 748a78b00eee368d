"""Async Gemini completion client with retry, timeout and search grounding."""

import asyncio
import logging
import os

from pydantic_ai import Agent, WebSearchTool
from pydantic_ai.exceptions import AgentRunError, ModelHTTPError
from pydantic_ai.models import Model

from sunday_edition.llm_providers import get_model_string

from .config import GeminiConfig
from .exceptions import GeminiAPIError, GeminiConfigError, GeminiTimeoutError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Text completion backed by a pydantic-ai Agent per (grounded, system prompt).

    Grounded calls attach the built-in ``WebSearchTool`` so the model answers
    from live search results.
    """

    def __init__(
        self,
        api_key: str = "",
        config: GeminiConfig | None = None,
        model: Model | None = None,
    ):
        self.api_key = api_key
        self.config = config or GeminiConfig()
        self._model = model
        self._agents: dict[tuple[bool, str | None], Agent[None, str]] = {}
        logger.info(f"Initialized GeminiClient (model={self.model_name})")

    @property
    def model_name(self) -> str:
        if self._model is not None:
            return self._model.model_name
        return self.config.model_name

    def _setup_api_keys(self) -> None:
        """Expose the API key to pydantic-ai's Google provider."""
        if self._model is not None:
            return
        if not self.api_key:
            raise GeminiConfigError("GEMINI_API_KEY not configured")
        os.environ["GOOGLE_API_KEY"] = self.api_key

    def _get_agent(self, grounded: bool, system_prompt: str | None) -> Agent[None, str]:
        key = (grounded, system_prompt)
        if key not in self._agents:
            self._setup_api_keys()
            self._agents[key] = Agent(
                model=self._model or get_model_string(self.config.model_name),
                output_type=str,
                system_prompt=system_prompt or (),
                builtin_tools=[WebSearchTool()] if grounded else [],
            )
        return self._agents[key]

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        grounded: bool = False,
        system_prompt: str | None = None,
    ) -> str:
        """Run one completion and return its text.

        Raises:
            GeminiConfigError: No API key and no injected model
            GeminiTimeoutError: The run exceeded ``timeout_seconds``
            GeminiAPIError: Any other failure, after retries for 429/5xx
        """
        agent = self._get_agent(grounded, system_prompt)
        delays = self.config.retry_delays_seconds
        retry_count = 0

        while True:
            try:
                async with asyncio.timeout(self.config.timeout_seconds):
                    result = await agent.run(
                        prompt, model_settings={"temperature": temperature}
                    )
                return result.output.strip()

            except TimeoutError as e:
                raise GeminiTimeoutError(
                    f"Gemini call timed out after {self.config.timeout_seconds}s"
                ) from e

            except ModelHTTPError as e:
                retryable = e.status_code == 429 or e.status_code >= 500
                if retryable and retry_count < len(delays):
                    wait_time = delays[retry_count]
                    logger.warning(
                        f"Gemini returned {e.status_code}, retrying in {wait_time}s "
                        f"({retry_count + 1}/{len(delays)})..."
                    )
                    await asyncio.sleep(wait_time)
                    retry_count += 1
                    continue
                raise GeminiAPIError(
                    f"Gemini request failed after {retry_count} retries: {e}",
                    status_code=e.status_code,
                ) from e

            except AgentRunError as e:
                raise GeminiAPIError(f"Gemini run failed: {e}") from e
