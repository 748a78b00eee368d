"""Recover a JSON payload from free-form model output.

Models asked to "respond with ONLY JSON" still wrap it in fences or add
prose around it. ``extract_json`` tolerates both and never raises: callers
match on ``Extracted`` or ``ExtractionError``.
"""

import json
import re
from dataclasses import dataclass
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ValidationError

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Extracted[T]:
    """Successfully parsed (and optionally validated) payload."""

    value: T


@dataclass(frozen=True, slots=True)
class ExtractionError:
    """Why no usable payload could be recovered."""

    reason: str
    excerpt: str = ""


type ExtractionResult[T] = Extracted[T] | ExtractionError


def _candidates(text: str, required_key: str) -> list[str]:
    candidates = [m.group(1) for m in _FENCED_JSON.finditer(text)]
    greedy = re.search(r'\{[\s\S]*"' + re.escape(required_key) + r'"[\s\S]*\}', text)
    if greedy:
        candidates.append(greedy.group(0))
    return candidates


def _scan_objects(text: str) -> Iterator[dict[str, Any]]:
    """Every JSON object that decodes cleanly starting at some ``{``."""
    decoder = json.JSONDecoder()
    for match in re.finditer(r"\{", text):
        try:
            payload, _ = decoder.raw_decode(text, match.start())
        except json.JSONDecodeError:
            continue
        if isinstance(payload, dict):
            yield payload


def extract_json(text: str | None, required_key: str) -> ExtractionResult[dict[str, Any]]:
    """Extract the JSON object containing ``required_key`` from model output.

    Tries fenced ```json blocks first, then the outermost ``{...}`` span that
    mentions the key, then any embedded object that decodes on its own.
    """
    if not text or not text.strip():
        return ExtractionError(reason="empty response")

    last_error = ""
    for candidate in _candidates(text, required_key):
        try:
            payload = json.loads(candidate.strip())
        except json.JSONDecodeError as e:
            last_error = f"invalid JSON: {e.msg}"
            continue
        if not isinstance(payload, dict):
            last_error = "JSON payload is not an object"
            continue
        if required_key not in payload:
            last_error = f"JSON payload missing '{required_key}'"
            continue
        return Extracted(payload)

    for payload in _scan_objects(text):
        if required_key in payload:
            return Extracted(payload)

    return ExtractionError(reason=last_error or "no JSON block found", excerpt=text[:200])


def extract_model[M: BaseModel](
    text: str | None, required_key: str, model: type[M]
) -> ExtractionResult[M]:
    """Extract and validate the payload against a pydantic model."""
    match extract_json(text, required_key):
        case Extracted(value=payload):
            try:
                return Extracted(model.model_validate(payload))
            except ValidationError as e:
                return ExtractionError(
                    reason=f"payload failed validation: {e.error_count()} error(s)",
                    excerpt=json.dumps(payload)[:200],
                )
        case ExtractionError() as error:
            return error
