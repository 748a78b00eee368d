"""Per-locale Sunday Edition orchestration.

Fetch -> Significance -> Synthesis -> Events (Tier A -> curation | Tier B)
-> Sort -> Holiday -> Data point -> Sanitize & assemble.

Stages run strictly one after another: they share a rate-limited completion
service. Every stage is isolated, so a failure degrades that section to its
default and the rest of the brief is still produced.
"""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field

from sunday_edition.config import PipelineConfig, Settings
from sunday_edition.models import (
    HolidaySection,
    HorizonEvent,
    Locale,
    RearviewStory,
    WeeklyBriefContent,
    WeeklyDataPoint,
)
from sunday_edition.seasonal import DEFAULT_REGISTRY, HOLIDAYS, HolidayRegistry
from sunday_edition.services.completion import (
    CompletionService,
    EventSearchService,
    ThrottledCompletion,
)
from sunday_edition.services.gemini import GeminiClient, GeminiConfig
from sunday_edition.services.grok import GrokConfig
from sunday_edition.stages.data_point import (
    generate_data_point,
    select_data_point_type,
    unavailable_data_point,
)
from sunday_edition.stages.holiday import build_holiday_section
from sunday_edition.stages.horizon import (
    curate_events,
    hunt_events_grounded,
    hunt_upcoming_events,
    sort_events,
)
from sunday_edition.stages.rearview import (
    editorial_synthesis,
    quiet_week_narrative,
    significance_filter,
    synthesis_fallback,
)
from sunday_edition.storage.articles import ArticleStore, FileArticleStore
from sunday_edition.text import clean_headline, strip_dashes

logger = logging.getLogger(__name__)


class BriefDependencies(BaseModel):
    """Collaborators injected into one locale's run."""

    model_config = {"arbitrary_types_allowed": True}

    article_store: ArticleStore
    completion: CompletionService
    event_search: EventSearchService | None = None
    registry: HolidayRegistry = Field(default_factory=lambda: DEFAULT_REGISTRY)
    config: PipelineConfig = Field(default_factory=PipelineConfig)


async def _run_stage[T](
    locale: Locale, stage: str, fn: Callable[[], Awaitable[T]], default: T
) -> T:
    try:
        return await fn()
    except Exception as e:
        logger.error(f"{locale.name}: {stage} failed, using default: {e}")
        return default


def _clean(text: str) -> str:
    return strip_dashes(text).strip()


def assemble_brief(
    narrative: str,
    stories: list[RearviewStory],
    events: list[HorizonEvent],
    data_point: WeeklyDataPoint,
    holiday_section: HolidaySection | None,
) -> WeeklyBriefContent:
    """Build the aggregate, normalizing every free-text field exactly once."""
    return WeeklyBriefContent(
        rearview_narrative=_clean(narrative),
        rearview_stories=[
            RearviewStory(
                headline=clean_headline(story.headline),
                significance=_clean(story.significance),
            )
            for story in stories
        ],
        horizon_events=[
            HorizonEvent(
                day=_clean(event.day),
                name=_clean(event.name),
                why_it_matters=_clean(event.why_it_matters),
                category=_clean(event.category),
            )
            for event in events
        ],
        data_point=data_point.model_copy(
            update={"value": _clean(data_point.value), "context": _clean(data_point.context)}
        ),
        holiday_section=(
            holiday_section.model_copy(
                update={
                    "events": [
                        event.model_copy(
                            update={
                                "name": _clean(event.name),
                                "day": _clean(event.day),
                                "description": _clean(event.description),
                            }
                        )
                        for event in holiday_section.events
                    ]
                }
            )
            if holiday_section
            else None
        ),
    )


async def run_weekly_brief(
    locale: Locale,
    deps: BriefDependencies,
    now: datetime | None = None,
) -> WeeklyBriefContent:
    """Generate one locale's Sunday Edition. Never raises past this boundary."""
    now = now or datetime.now(timezone.utc)
    cfg = deps.config
    completion = deps.completion

    # The Rearview
    logger.info(f"{locale.name}: fetching past week's stories...")
    articles = await _run_stage(
        locale,
        "article fetch",
        lambda: deps.article_store.fetch_week_articles(
            locale.query_ids(),
            since=now - timedelta(days=cfg.lookback_days),
            limit=cfg.article_limit,
        ),
        default=[],
    )
    logger.info(f"{locale.name}: found {len(articles)} articles from past week")

    headlines = [clean_headline(article.headline) for article in articles]
    stories = await _run_stage(
        locale,
        "significance filter",
        lambda: significance_filter(completion, headlines, locale, cfg),
        default=[],
    )
    narrative = await _run_stage(
        locale,
        "editorial synthesis",
        lambda: editorial_synthesis(completion, stories, articles, locale, cfg),
        default=synthesis_fallback(locale.name) if stories else quiet_week_narrative(locale.name),
    )

    # The Horizon
    logger.info(f"{locale.name}: hunting upcoming events...")
    events: list[HorizonEvent] = []
    event_search = deps.event_search
    if event_search is not None:
        raw_events = await _run_stage(
            locale,
            "event search",
            lambda: hunt_upcoming_events(event_search, locale, now),
            default="",
        )
        if raw_events:
            events = await _run_stage(
                locale,
                "event curation",
                lambda: curate_events(completion, raw_events, locale, cfg),
                default=[],
            )
    else:
        logger.info(f"{locale.name}: event search not configured")

    if not events:
        logger.info(f"{locale.name}: falling back to grounded event search")
        events = await _run_stage(
            locale,
            "grounded event search",
            lambda: hunt_events_grounded(completion, locale, now, cfg),
            default=[],
        )
    events = sort_events(events, now)

    # That Time of Year
    holiday_section = await _run_stage(
        locale,
        "holiday section",
        lambda: build_holiday_section(
            completion, event_search, deps.registry, locale, now, cfg
        ),
        default=None,
    )

    # The Weekly Data Point
    logger.info(f"{locale.name}: generating data point...")
    data_point = await _run_stage(
        locale,
        "data point",
        lambda: generate_data_point(completion, locale, now),
        default=unavailable_data_point(select_data_point_type(now)),
    )

    brief = assemble_brief(narrative, stories, events, data_point, holiday_section)
    logger.info(
        f"{locale.name}: brief ready ({len(brief.rearview_stories)} stories, "
        f"{len(brief.horizon_events)} events, "
        f"holiday={'yes' if brief.holiday_section else 'no'}, "
        f"data point={brief.data_point.type})"
    )
    return brief


def build_grok_config(settings: Settings) -> GrokConfig:
    return GrokConfig(
        model_name=settings.models.grok,
        timeout_seconds=settings.pipeline.call_timeout_seconds,
    )


def build_dependencies(
    settings: Settings,
    model_name: str | None = None,
    event_search: EventSearchService | None = None,
    article_store: ArticleStore | None = None,
    completion: CompletionService | None = None,
) -> BriefDependencies:
    """Wire the production collaborators for one locale run.

    ``event_search`` is None when no Grok key is configured, which disables Tier A.
    """
    cfg = settings.pipeline
    if completion is None:
        completion = GeminiClient(
            api_key=settings.gemini_api_key,
            config=GeminiConfig(
                model_name=model_name or settings.models.pro,
                timeout_seconds=cfg.call_timeout_seconds,
            ),
        )

    if cfg.holiday_window_days == DEFAULT_REGISTRY.window_days:
        registry = DEFAULT_REGISTRY
    else:
        registry = HolidayRegistry(HOLIDAYS, window_days=cfg.holiday_window_days)

    return BriefDependencies(
        article_store=article_store or FileArticleStore(settings.data_dir),
        completion=ThrottledCompletion(
            completion,
            max_concurrent=cfg.max_concurrent_llm_calls,
            timeout_seconds=cfg.call_timeout_seconds,
        ),
        event_search=event_search,
        registry=registry,
        config=cfg,
    )
