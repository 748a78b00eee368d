"""Structured output parsed from data point completions."""

from pydantic import BaseModel, field_validator


class DataPointResult(BaseModel):
    """Payload of a data point lookup: ``{"value": ..., "context": ...}``."""

    value: str = ""
    context: str = ""

    @field_validator("value", "context", mode="before")
    @classmethod
    def stringify(cls, v: object) -> str:
        """Models sometimes answer with a bare number or null."""
        return "" if v is None else str(v)
