"""Tests for the weekly batch driver and its model budget."""

import asyncio
from datetime import date, datetime, timezone

from fakes import DATA_POINT, MemoryArticleStore, ScriptedCompletion

from sunday_edition.config import BatchConfig, Settings
from sunday_edition.models import Locale
from sunday_edition.batch import ModelBudget, edition_week_date, run_weekly_batch
from sunday_edition.storage.briefs import get_brief_path, load_brief

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

LOCALES = [
    Locale(id="tribeca", name="Tribeca", city="New York", country="USA"),
    Locale(id="daikanyama", name="Daikanyama", city="Tokyo", country="Japan"),
]


def _settings(tmp_path, **overrides) -> Settings:
    return Settings(
        _env_file=None,
        data_dir=tmp_path,
        locales=LOCALES,
        gemini_api_key="",
        grok_api_key="",
        **overrides,
    )


def test_edition_week_date() -> None:
    assert edition_week_date(date(2026, 10, 19)) == "2026-10-25"  # Monday
    assert edition_week_date(date(2026, 10, 25)) == "2026-10-25"  # Sunday
    assert edition_week_date(datetime(2026, 12, 28, tzinfo=timezone.utc)) == "2027-01-03"


def test_model_budget_falls_back_to_flash() -> None:
    budget = ModelBudget("pro", "flash", daily_budget=10, calls_per_locale=5)

    assert [budget.next_model() for _ in range(3)] == ["pro", "pro", "flash"]
    assert budget.pro_count == 2
    assert budget.flash_count == 1


def test_batch_generates_skips_and_forces(tmp_path) -> None:
    settings = _settings(tmp_path)
    models_used: list[str] = []

    def completion_factory(model_name: str) -> ScriptedCompletion:
        models_used.append(model_name)
        return ScriptedCompletion([(DATA_POINT, '{"value": "$7.25", "context": "Up."}')])

    def run(force: bool = False):
        return asyncio.run(
            run_weekly_batch(
                settings,
                now=NOW,
                force=force,
                completion_factory=completion_factory,
                article_store=MemoryArticleStore(),
            )
        )

    first = run()
    assert first.week_date == "2026-10-25"
    assert (first.generated, first.skipped, first.errors) == (2, 0, [])
    assert first.pro_count == 2
    assert set(models_used) == {settings.models.pro}

    saved = load_brief(get_brief_path(tmp_path, "tribeca", "2026-10-25"))
    assert saved.data_point.value == "$7.25"

    second = run()
    assert (second.generated, second.skipped) == (0, 2)

    forced = run(force=True)
    assert (forced.generated, forced.skipped) == (2, 0)


def test_batch_assigns_flash_after_budget(tmp_path) -> None:
    settings = _settings(tmp_path, batch=BatchConfig(pro_daily_budget=5, calls_per_locale=5))
    models_used: list[str] = []

    def completion_factory(model_name: str) -> ScriptedCompletion:
        models_used.append(model_name)
        return ScriptedCompletion()

    result = asyncio.run(
        run_weekly_batch(
            settings,
            now=NOW,
            completion_factory=completion_factory,
            article_store=MemoryArticleStore(),
        )
    )

    assert (result.pro_count, result.flash_count) == (1, 1)
    assert sorted(models_used) == sorted([settings.models.pro, settings.models.flash])


def test_batch_selects_locales_and_ignores_unknown(tmp_path) -> None:
    settings = _settings(tmp_path)

    result = asyncio.run(
        run_weekly_batch(
            settings,
            now=NOW,
            locale_ids=["daikanyama", "atlantis"],
            completion_factory=lambda model_name: ScriptedCompletion(),
            article_store=MemoryArticleStore(),
        )
    )

    assert result.generated == 1
    assert get_brief_path(tmp_path, "daikanyama", "2026-10-25").exists()
    assert not get_brief_path(tmp_path, "tribeca", "2026-10-25").exists()


def test_batch_records_per_locale_failures(tmp_path) -> None:
    settings = _settings(tmp_path)
    # A blocking file where the week directory should go makes saving fail
    (tmp_path / "briefs").write_text("not a directory")

    result = asyncio.run(
        run_weekly_batch(
            settings,
            now=NOW,
            completion_factory=lambda model_name: ScriptedCompletion(),
            article_store=MemoryArticleStore(),
        )
    )

    assert result.generated == 0
    assert result.processed == 2
    assert len(result.errors) == 2
    assert result.errors[0].split(":")[0] in {"tribeca", "daikanyama"}
