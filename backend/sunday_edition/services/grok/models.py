"""Type-safe Pydantic models for Grok Responses API payloads."""

from typing import Literal

from pydantic import BaseModel, Field


class GrokInputMessage(BaseModel):
    role: Literal["system", "user"]
    content: str


class GrokRequest(BaseModel):
    """Body of ``POST /responses``."""

    model: str
    input: list[GrokInputMessage]
    tools: list[dict[str, str]] = Field(default_factory=list)
    temperature: float = 0.5


class GrokContentPart(BaseModel):
    type: str
    text: str = ""


class GrokOutputItem(BaseModel):
    """One output item; only ``message`` items carry answer text."""

    type: str
    content: str | list[GrokContentPart] | None = None


class GrokResponse(BaseModel):
    """Response from ``POST /responses``."""

    id: str = ""
    output: list[GrokOutputItem] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Answer text: message items joined by newlines, output_text parts concatenated."""
        chunks: list[str] = []
        for item in self.output:
            if item.type != "message" or item.content is None:
                continue
            if isinstance(item.content, str):
                chunks.append(item.content)
            else:
                chunks.append(
                    "".join(part.text for part in item.content if part.type == "output_text")
                )
        return "\n".join(chunks).strip()
