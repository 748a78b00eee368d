"""Weekly batch driver: one edition per configured locale.

Locales run concurrently up to ``batch.concurrency``; inside a locale the
stages stay sequential. Each locale's completion calls are charged against a
daily pro-model budget, after which locales fall back to the flash model.
"""

import asyncio
import logging
from collections.abc import Callable
from contextlib import AsyncExitStack
from datetime import date, datetime, timedelta, timezone

from pydantic import BaseModel, Field

from sunday_edition.config import Settings
from sunday_edition.models import Locale
from sunday_edition.pipeline import build_dependencies, build_grok_config, run_weekly_brief
from sunday_edition.services.completion import CompletionService, EventSearchService
from sunday_edition.services.grok import GrokClient
from sunday_edition.storage.articles import ArticleStore
from sunday_edition.storage.briefs import brief_exists, save_brief

logger = logging.getLogger(__name__)

SUNDAY = 6  # date.weekday()


def edition_week_date(now: date | datetime) -> str:
    """The Sunday an edition belongs to: today if Sunday, else the coming Sunday."""
    today = now.date() if isinstance(now, datetime) else now
    days_ahead = (SUNDAY - today.weekday()) % 7
    return (today + timedelta(days=days_ahead)).isoformat()


class ModelBudget:
    """Hands out the pro model while a whole locale's calls still fit the budget."""

    def __init__(
        self,
        pro_model: str,
        flash_model: str,
        daily_budget: int,
        calls_per_locale: int,
    ):
        self.pro_model = pro_model
        self.flash_model = flash_model
        self.remaining = daily_budget
        self.calls_per_locale = calls_per_locale
        self.pro_count = 0
        self.flash_count = 0

    def next_model(self) -> str:
        if self.remaining >= self.calls_per_locale:
            self.remaining -= self.calls_per_locale
            self.pro_count += 1
            return self.pro_model
        self.flash_count += 1
        return self.flash_model


class BatchResult(BaseModel):
    """Summary of one batch run."""

    week_date: str
    processed: int = 0
    generated: int = 0
    skipped: int = 0
    pro_count: int = 0
    flash_count: int = 0
    errors: list[str] = Field(default_factory=list)


def _select_locales(settings: Settings, locale_ids: list[str] | None) -> list[Locale]:
    if not locale_ids:
        return list(settings.locales)
    selected = []
    for locale_id in locale_ids:
        locale = settings.get_locale(locale_id)
        if locale is None:
            logger.warning(f"Unknown locale id: {locale_id}")
            continue
        selected.append(locale)
    return selected


async def run_weekly_batch(
    settings: Settings,
    now: datetime | None = None,
    locale_ids: list[str] | None = None,
    force: bool = False,
    completion_factory: Callable[[str], CompletionService] | None = None,
    event_search: EventSearchService | None = None,
    article_store: ArticleStore | None = None,
) -> BatchResult:
    """Generate and save this week's edition for every selected locale.

    Locales that already have an edition for the week are skipped unless
    ``force`` is set. Per-locale failures are recorded in the result.
    """
    now = now or datetime.now(timezone.utc)
    week_date = edition_week_date(now)
    result = BatchResult(week_date=week_date)

    pending: list[Locale] = []
    for locale in _select_locales(settings, locale_ids):
        if not force and brief_exists(settings.data_dir, locale.id, week_date):
            logger.info(f"{locale.name}: edition for {week_date} already exists, skipping")
            result.skipped += 1
            continue
        pending.append(locale)

    if not pending:
        logger.info(f"No locales to process for {week_date}")
        return result

    budget = ModelBudget(
        pro_model=settings.models.pro,
        flash_model=settings.models.flash,
        daily_budget=settings.batch.pro_daily_budget,
        calls_per_locale=settings.batch.calls_per_locale,
    )
    assignments = [(locale, budget.next_model()) for locale in pending]
    result.pro_count = budget.pro_count
    result.flash_count = budget.flash_count
    logger.info(
        f"Batch {week_date}: {len(pending)} locales "
        f"(pro={budget.pro_count}, flash={budget.flash_count}, "
        f"concurrency={settings.batch.concurrency})"
    )

    semaphore = asyncio.Semaphore(settings.batch.concurrency)

    async with AsyncExitStack() as stack:
        if event_search is None and settings.grok_api_key:
            event_search = await stack.enter_async_context(
                GrokClient(
                    api_key=settings.grok_api_key,
                    config=build_grok_config(settings),
                )
            )

        async def generate(locale: Locale, model_name: str) -> None:
            async with semaphore:
                try:
                    deps = build_dependencies(
                        settings,
                        model_name=model_name,
                        event_search=event_search,
                        article_store=article_store,
                        completion=completion_factory(model_name) if completion_factory else None,
                    )
                    brief = await run_weekly_brief(locale, deps, now)
                    save_brief(settings.data_dir, locale, week_date, brief, model_name)
                    result.generated += 1
                except Exception as e:
                    logger.error(f"{locale.name}: edition failed: {e}")
                    result.errors.append(f"{locale.id}: {e}")
                finally:
                    result.processed += 1

        await asyncio.gather(*(generate(locale, model) for locale, model in assignments))

    logger.info(
        f"Batch {week_date} complete: generated={result.generated} "
        f"skipped={result.skipped} errors={len(result.errors)}"
    )
    return result
