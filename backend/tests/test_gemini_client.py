"""Tests for the Gemini completion client using pydantic-ai's FunctionModel."""

import asyncio

import pytest
from pydantic_ai.exceptions import ModelHTTPError
from pydantic_ai.messages import ModelMessage, ModelResponse, SystemPromptPart, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from sunday_edition.services.gemini import (
    GeminiAPIError,
    GeminiClient,
    GeminiConfig,
    GeminiConfigError,
    GeminiTimeoutError,
)

NO_WAIT = GeminiConfig(retry_delays_seconds=[0.0, 0.0])


def test_complete_returns_trimmed_text() -> None:
    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        return ModelResponse(parts=[TextPart("  The week in review.  \n")])

    client = GeminiClient(model=FunctionModel(reply))

    assert asyncio.run(client.complete("hello", temperature=0.7)) == "The week in review."


def test_complete_passes_temperature_and_system_prompt() -> None:
    seen: dict = {}

    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        seen["temperature"] = (info.model_settings or {}).get("temperature")
        seen["system"] = [
            part.content
            for message in messages
            for part in getattr(message, "parts", [])
            if isinstance(part, SystemPromptPart)
        ]
        return ModelResponse(parts=[TextPart("ok")])

    client = GeminiClient(model=FunctionModel(reply))
    asyncio.run(client.complete("hello", temperature=0.3, system_prompt="Be a local."))

    assert seen["temperature"] == 0.3
    assert seen["system"] == ["Be a local."]


def test_agents_are_cached_per_grounding_and_system_prompt() -> None:
    client = GeminiClient(model=FunctionModel(lambda messages, info: ModelResponse(parts=[])))

    plain = client._get_agent(False, None)
    assert client._get_agent(False, None) is plain
    assert client._get_agent(True, None) is not plain
    assert client._get_agent(False, "system") is not plain


def test_retries_rate_limit_then_succeeds() -> None:
    attempts = []

    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        attempts.append(1)
        if len(attempts) < 3:
            raise ModelHTTPError(status_code=503, model_name="gemini-test")
        return ModelResponse(parts=[TextPart("recovered")])

    client = GeminiClient(config=NO_WAIT, model=FunctionModel(reply))

    assert asyncio.run(client.complete("hello", temperature=0.5)) == "recovered"
    assert len(attempts) == 3


def test_retries_exhausted_raises_api_error() -> None:
    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        raise ModelHTTPError(status_code=429, model_name="gemini-test")

    client = GeminiClient(config=NO_WAIT, model=FunctionModel(reply))

    with pytest.raises(GeminiAPIError) as exc_info:
        asyncio.run(client.complete("hello", temperature=0.5))
    assert exc_info.value.status_code == 429


def test_client_error_is_not_retried() -> None:
    attempts = []

    def reply(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        attempts.append(1)
        raise ModelHTTPError(status_code=400, model_name="gemini-test")

    client = GeminiClient(config=NO_WAIT, model=FunctionModel(reply))

    with pytest.raises(GeminiAPIError) as exc_info:
        asyncio.run(client.complete("hello", temperature=0.5))
    assert exc_info.value.status_code == 400
    assert len(attempts) == 1


def test_timeout_raises_timeout_error() -> None:
    async def slow(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        await asyncio.sleep(1)
        return ModelResponse(parts=[TextPart("too late")])

    client = GeminiClient(
        config=GeminiConfig(timeout_seconds=0.01), model=FunctionModel(slow)
    )

    with pytest.raises(GeminiTimeoutError):
        asyncio.run(client.complete("hello", temperature=0.5))


def test_missing_api_key_raises_config_error() -> None:
    client = GeminiClient(api_key="")

    with pytest.raises(GeminiConfigError):
        asyncio.run(client.complete("hello", temperature=0.5))
