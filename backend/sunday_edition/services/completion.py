"""Completion service contracts and the per-locale call throttle."""

import asyncio
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionService(Protocol):
    """Natural-language instruction in, free text out."""

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        grounded: bool = False,
        system_prompt: str | None = None,
    ) -> str: ...


@runtime_checkable
class EventSearchService(Protocol):
    """Search-augmented completion (social + web) used for Tier A event hunting."""

    async def search(
        self,
        prompt: str,
        *,
        system_prompt: str,
        temperature: float = 0.5,
    ) -> str: ...


class ThrottledCompletion:
    """Bounds concurrency and wall time of calls to a CompletionService.

    With ``max_concurrent=1`` every call made through this wrapper is serialized,
    which keeps a locale's stages under the provider's rate limit.
    """

    def __init__(
        self,
        inner: CompletionService,
        max_concurrent: int = 1,
        timeout_seconds: float = 120.0,
    ):
        self.inner = inner
        self.timeout_seconds = timeout_seconds
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        grounded: bool = False,
        system_prompt: str | None = None,
    ) -> str:
        async with self._semaphore:
            try:
                async with asyncio.timeout(self.timeout_seconds):
                    return await self.inner.complete(
                        prompt,
                        temperature=temperature,
                        grounded=grounded,
                        system_prompt=system_prompt,
                    )
            except TimeoutError:
                logger.warning(f"Completion call exceeded {self.timeout_seconds}s")
                raise
