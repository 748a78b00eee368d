"""Rearview: pick the week's significant stories and weave them into a narrative."""

import logging

from sunday_edition.config import PipelineConfig
from sunday_edition.models import Article, Locale, RearviewStory
from sunday_edition.services.completion import CompletionService
from sunday_edition.text import Extracted, ExtractionError, clean_headline, extract_model

from .models import SignificanceResult
from .prompts import (
    QUIET_WEEK_NARRATIVE,
    SIGNIFICANCE_PROMPT,
    STORY_CONTEXT_TEMPLATE,
    SYNTHESIS_FALLBACK,
    SYNTHESIS_PROMPT,
)

logger = logging.getLogger(__name__)

SIGNIFICANCE_TEMPERATURE = 0.3
SYNTHESIS_TEMPERATURE = 0.7


def headlines_match(a: str, b: str, match_chars: int = 30) -> bool:
    """Leading-character containment either way, on cleaned lowercase headlines."""
    a = clean_headline(a).lower()
    b = clean_headline(b).lower()
    if not a or not b:
        return False
    return a[:match_chars] in b or b[:match_chars] in a


def quiet_week_narrative(locale_name: str) -> str:
    return QUIET_WEEK_NARRATIVE.format(name=locale_name)


def synthesis_fallback(locale_name: str) -> str:
    return SYNTHESIS_FALLBACK.format(name=locale_name)


async def significance_filter(
    completion: CompletionService,
    headlines: list[str],
    locale: Locale,
    config: PipelineConfig,
) -> list[RearviewStory]:
    """Select up to ``config.max_stories`` stories from this week's headlines.

    An empty week returns [] without calling the completion service. Stories
    whose headline matches none of ``headlines`` are dropped.
    """
    if not headlines:
        return []

    headline_list = "\n".join(f"{i}. {h}" for i, h in enumerate(headlines, 1))
    prompt = SIGNIFICANCE_PROMPT.format(
        name=locale.name,
        city=locale.city,
        max_stories=config.max_stories,
        headline_list=headline_list,
    )
    text = await completion.complete(prompt, temperature=SIGNIFICANCE_TEMPERATURE)

    match extract_model(text, "stories", SignificanceResult):
        case Extracted(value=result):
            stories = [
                story
                for story in result.stories
                if any(
                    headlines_match(story.headline, h, config.headline_match_chars)
                    for h in headlines
                )
            ][: config.max_stories]
            if len(stories) < min(len(result.stories), config.max_stories):
                logger.warning(f"{locale.name}: dropped stories matching no input headline")
            logger.info(f"{locale.name}: selected {len(stories)} of {len(headlines)} stories")
            return stories
        case ExtractionError(reason=reason):
            logger.warning(f"{locale.name}: significance filter output unusable ({reason})")
            return []


def find_source_article(
    story: RearviewStory, articles: list[Article], match_chars: int = 30
) -> Article | None:
    """First article whose headline contains the story's leading characters, or vice versa.

    Near-duplicate headlines can match the wrong article.
    """
    for article in articles:
        if headlines_match(story.headline, article.headline, match_chars):
            return article
    return None


def build_story_context(
    stories: list[RearviewStory], articles: list[Article], config: PipelineConfig
) -> str:
    blocks = []
    for story in stories:
        source = find_source_article(story, articles, config.headline_match_chars)
        body = source.body[: config.source_excerpt_chars] if source else ""
        blocks.append(
            STORY_CONTEXT_TEMPLATE.format(
                headline=story.headline, significance=story.significance, body=body
            )
        )
    return "\n\n".join(blocks)


async def editorial_synthesis(
    completion: CompletionService,
    stories: list[RearviewStory],
    articles: list[Article],
    locale: Locale,
    config: PipelineConfig,
) -> str:
    """Write the Rearview narrative with exactly one completion call.

    No stories yields the quiet-week narrative without calling the service.
    """
    if not stories:
        logger.info(f"{locale.name}: no stories selected, using quiet-week narrative")
        return quiet_week_narrative(locale.name)

    prompt = SYNTHESIS_PROMPT.format(
        name=locale.name,
        city=locale.city,
        story_context=build_story_context(stories, articles, config),
    )
    narrative = (await completion.complete(prompt, temperature=SYNTHESIS_TEMPERATURE)).strip()
    if not narrative:
        logger.warning(f"{locale.name}: synthesis returned empty text")
        return synthesis_fallback(locale.name)
    return narrative
