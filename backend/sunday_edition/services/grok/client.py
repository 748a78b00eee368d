from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from .config import GrokConfig
from .exceptions import (
    GrokAPIError,
    GrokAuthError,
    GrokRateLimitError,
    GrokServerError,
    GrokTimeoutError,
)
from .models import GrokInputMessage, GrokRequest, GrokResponse

logger = logging.getLogger(__name__)


class GrokClient:
    """Grok Responses API client used as a search-augmented event hunter."""

    def __init__(
        self,
        api_key: str,
        config: GrokConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.config = config or GrokConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        logger.info(f"Initialized GrokClient (model={self.config.model_name})")

    async def __aenter__(self) -> GrokClient:
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            headers={"Authorization": f"Bearer {self.api_key}"},
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: Any,
    ) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Closed GrokClient")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("GrokClient must be used as async context manager")
        return self._client

    async def _request(self, endpoint: str, json_data: dict[str, Any]) -> dict[str, Any]:
        retry_count = 0
        last_error: GrokAPIError | None = None

        while retry_count < self.config.max_retries:
            retry_count += 1
            can_retry = retry_count < self.config.max_retries
            wait_time = 2 ** (retry_count - 1)

            try:
                response = await self.client.post(endpoint, json=json_data)
            except httpx.TimeoutException as e:
                last_error = GrokTimeoutError(f"Grok request timed out: {e}")
                if can_retry:
                    logger.warning(f"Grok timeout, retrying ({retry_count})...")
                    await asyncio.sleep(wait_time)
                continue
            except httpx.RequestError as e:
                logger.error(f"Grok network error: {e}")
                raise GrokAPIError(f"Network error: {e}") from e

            if response.status_code in (401, 403):
                raise GrokAuthError("Authentication failed", status_code=response.status_code)
            elif response.status_code == 429:
                last_error = GrokRateLimitError("Rate limit exceeded", status_code=429)
                if can_retry:
                    logger.warning(f"Grok rate limited, waiting {wait_time}s...")
                    await asyncio.sleep(wait_time)
                continue
            elif response.status_code >= 500:
                last_error = GrokServerError(
                    f"Server error {response.status_code}", status_code=response.status_code
                )
                if can_retry:
                    logger.warning(
                        f"Grok server error {response.status_code}, "
                        f"retrying in {wait_time}s..."
                    )
                    await asyncio.sleep(wait_time)
                continue
            elif response.status_code >= 400:
                raise GrokAPIError(
                    f"Grok request rejected: {response.text[:200]}",
                    status_code=response.status_code,
                )

            return response.json()

        raise last_error or GrokAPIError("Grok request failed")

    async def search(
        self,
        prompt: str,
        *,
        system_prompt: str,
        temperature: float = 0.5,
    ) -> str:
        """Ask Grok with X and web search enabled; returns the flattened answer text.

        Raises:
            GrokAPIError: On failure after retries, or when the answer has no text
        """
        request = GrokRequest(
            model=self.config.model_name,
            input=[
                GrokInputMessage(role="system", content=system_prompt),
                GrokInputMessage(role="user", content=prompt),
            ],
            tools=[{"type": tool} for tool in self.config.search_tools],
            temperature=temperature,
        )
        data = await self._request("/responses", request.model_dump())
        text = GrokResponse.model_validate(data).text
        if not text:
            raise GrokAPIError("Grok response contained no message text")
        return text
