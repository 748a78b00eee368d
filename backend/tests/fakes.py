"""In-memory stand-ins for the completion, search and article services."""

from datetime import datetime

from sunday_edition.models import Article


class ScriptedCompletion:
    """Answers each prompt with the reply of the first rule whose marker it contains.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(self, rules: list[tuple[str, str | Exception]] | None = None, default: str = ""):
        self.rules = rules or []
        self.default = default
        self.calls: list[dict] = []

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        grounded: bool = False,
        system_prompt: str | None = None,
    ) -> str:
        self.calls.append(
            {"prompt": prompt, "temperature": temperature, "grounded": grounded}
        )
        for marker, reply in self.rules:
            if marker in prompt:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        return self.default

    def prompts_containing(self, marker: str) -> list[str]:
        return [call["prompt"] for call in self.calls if marker in call["prompt"]]


class ScriptedSearch:
    """Tier A search fake with a fixed reply (or exception)."""

    def __init__(self, reply: str | Exception):
        self.reply = reply
        self.calls: list[dict] = []

    async def search(self, prompt: str, *, system_prompt: str, temperature: float = 0.5) -> str:
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt})
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


class MemoryArticleStore:
    def __init__(self, articles: list[Article] | None = None, error: Exception | None = None):
        self.articles = articles or []
        self.error = error
        self.calls: list[dict] = []

    async def fetch_week_articles(
        self, locale_ids: list[str], since: datetime, limit: int
    ) -> list[Article]:
        self.calls.append({"locale_ids": locale_ids, "since": since, "limit": limit})
        if self.error:
            raise self.error
        recent = [a for a in self.articles if a.published_at > since]
        return sorted(recent, key=lambda a: a.published_at, reverse=True)[:limit]


# Markers that route prompts to the stage that sent them
SIGNIFICANCE = "STORIES:"
SYNTHESIS = "weekly synthesis"
CURATION = "From these raw event listings"
GROUNDED_EVENTS = "Search for the top"
HOLIDAY_CURATION = "events or happenings"
DATA_POINT = "The key number or metric"
