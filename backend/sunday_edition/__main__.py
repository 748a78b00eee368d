"""Sunday Edition CLI entry point."""

import argparse
import asyncio
import logging
import sys
from contextlib import AsyncExitStack
from datetime import date, datetime, time, timezone
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path(__file__).parent.parent / ".env"
load_dotenv(env_file)

from sunday_edition import __version__
from sunday_edition.batch import edition_week_date, run_weekly_batch
from sunday_edition.config import Settings, get_settings
from sunday_edition.formatter import format_weekly_brief_as_article
from sunday_edition.models import Locale, WeeklyBriefContent
from sunday_edition.pipeline import build_dependencies, build_grok_config, run_weekly_brief
from sunday_edition.scheduler import start_scheduler
from sunday_edition.seasonal import detect_upcoming_holiday
from sunday_edition.services.grok import GrokClient
from sunday_edition.storage.briefs import save_brief

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE = """# Sunday Edition Configuration
# API keys belong in .env (GEMINI_API_KEY, GROK_API_KEY, LOGFIRE_TOKEN), not here.

pipeline:
  lookback_days: 7
  article_limit: 50
  max_stories: 3
  max_events: 3
  holiday_window_days: 7
  max_concurrent_llm_calls: 1
  call_timeout_seconds: 120

models:
  pro: gemini-3-pro-preview
  flash: gemini-3-flash-preview
  grok: grok-4-1-fast

batch:
  concurrency: 5
  pro_daily_budget: 1000
  calls_per_locale: 5

scheduler:
  day_of_week: sun
  hour: 4
  minute: 0
  timezone: UTC

# Article snapshots live in data/articles/<id>.yaml
locales:
  - id: tribeca
    name: Tribeca
    city: New York
    country: USA
    timezone: America/New_York
  - id: hamptons
    name: The Hamptons
    city: New York
    country: USA
    components: [east-hampton, southampton, sag-harbor, montauk]
    timezone: America/New_York
  - id: daikanyama
    name: Daikanyama
    city: Tokyo
    country: Japan
    timezone: Asia/Tokyo
"""


def _init_logfire() -> None:
    """Initialize Logfire if available, without failing commands."""
    try:
        from sunday_edition.observability import initialize_logfire

        initialize_logfire(get_settings())
    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")


def _parse_now(value: str | None) -> datetime:
    """Noon UTC on the given YYYY-MM-DD, or the current time."""
    if not value:
        return datetime.now(timezone.utc)
    return datetime.combine(date.fromisoformat(value), time(12), tzinfo=timezone.utc)


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize data directory structure and configuration file."""
    data_dir = Path("data").resolve()

    try:
        for subdir in ["articles", "briefs"]:
            (data_dir / subdir).mkdir(parents=True, exist_ok=True)
        logger.info(f"Created data directory: {data_dir}")

        config_path = data_dir / "config.yaml"
        if not config_path.exists():
            config_path.write_text(CONFIG_TEMPLATE)
            logger.info(f"Created config template: {config_path}")
        else:
            logger.info(f"Config file already exists: {config_path}")

        print(f"\n✓ Data directory initialized at {data_dir}")
        print("\nNext steps:")
        print("1. Add GEMINI_API_KEY (and optionally GROK_API_KEY) to .env")
        print("2. List your neighborhoods under 'locales' in data/config.yaml")
        print("3. Drop article snapshots into data/articles/<locale_id>.yaml")
        print("4. Run 'python -m sunday_edition generate --locale <id> --dry-run'\n")
        return 0

    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"\n❌ Initialization failed: {e}\n")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Display merged configuration."""
    try:
        settings = get_settings()

        print("\n=== Sunday Edition Configuration ===\n")
        print(f"Data Directory: {settings.data_dir}\n")

        print("Pipeline:")
        print(f"  Lookback: {settings.pipeline.lookback_days} days")
        print(f"  Article Limit: {settings.pipeline.article_limit}")
        print(f"  Stories / Events: {settings.pipeline.max_stories} / {settings.pipeline.max_events}")
        print(f"  Holiday Window: {settings.pipeline.holiday_window_days} days")
        print(f"  Max Concurrent LLM Calls: {settings.pipeline.max_concurrent_llm_calls}")
        print(f"  Call Timeout: {settings.pipeline.call_timeout_seconds}s\n")

        print("Models:")
        print(f"  Pro: {settings.models.pro}")
        print(f"  Flash: {settings.models.flash}")
        print(f"  Grok: {settings.models.grok}\n")

        print("Batch:")
        print(f"  Concurrency: {settings.batch.concurrency}")
        print(f"  Pro Daily Budget: {settings.batch.pro_daily_budget:,} requests")
        print(f"  Calls per Locale: {settings.batch.calls_per_locale}\n")

        schedule = settings.scheduler
        print("Scheduler:")
        print(f"  Weekly: {schedule.day_of_week} {schedule.hour:02d}:{schedule.minute:02d} {schedule.timezone}\n")

        print(f"Locales: {len(settings.locales)}")
        for locale in settings.locales:
            print(f"  • {locale.id}: {locale.name}, {locale.city}, {locale.country}")
        print()

        print("API Keys:")
        print(f"  Gemini: {'✓ Set' if settings.gemini_api_key else '✗ Not set (all completion stages will degrade)'}")
        print(f"  Grok: {'✓ Set' if settings.grok_api_key else '✗ Not set (event search uses grounded fallback)'}")
        print(f"  Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1
    except Exception as e:
        logger.error(f"Failed to load config: {e}")
        print(f"\n❌ Failed to load configuration: {e}\n")
        return 1


def cmd_holiday(args: argparse.Namespace) -> int:
    """Show the holiday detected for a country in the coming week."""
    try:
        now = _parse_now(args.date)
        holiday = detect_upcoming_holiday(args.country, now)

        if holiday is None:
            print(f"\nNo holiday for {args.country} within 7 days of {now.date()}\n")
        else:
            print(f"\n✓ {holiday.name}: {holiday.display_date} ({holiday.date})\n")
        return 0

    except ValueError as e:
        print(f"\n❌ Invalid date: {e}\n")
        return 1


async def _generate(settings: Settings, locale: Locale, now: datetime) -> WeeklyBriefContent:
    async with AsyncExitStack() as stack:
        event_search = None
        if settings.grok_api_key:
            event_search = await stack.enter_async_context(
                GrokClient(
                    api_key=settings.grok_api_key,
                    config=build_grok_config(settings),
                )
            )
        deps = build_dependencies(settings, event_search=event_search)
        return await run_weekly_brief(locale, deps, now)


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate one locale's edition and print it."""
    _init_logfire()

    try:
        settings = get_settings()
        locale = settings.get_locale(args.locale)
        if locale is None:
            print(f"\n❌ Unknown locale: {args.locale}")
            print("Add it under 'locales' in data/config.yaml.\n")
            return 1

        now = _parse_now(args.date)
        mode_label = "[DRY RUN] " if args.dry_run else ""
        print(f"\n{mode_label}Generating Sunday Edition for {locale.name} ({now.date()})...\n")

        brief = asyncio.run(_generate(settings, locale, now))
        print(format_weekly_brief_as_article(brief))
        print()

        if not args.dry_run:
            path = save_brief(
                settings.data_dir, locale, edition_week_date(now), brief, settings.models.pro
            )
            print(f"✓ Saved to {path}\n")
        return 0

    except Exception as e:
        logger.error(f"Generation failed: {e}", exc_info=True)
        print(f"\n❌ Generation failed: {e}\n")
        return 1


def cmd_run(args: argparse.Namespace) -> int:
    """Run the weekly batch once, or start the scheduler."""
    try:
        _init_logfire()

        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        settings = get_settings()

        print("\n=== Sunday Edition ===\n")
        print(f"Version: {__version__}")
        print(f"Locales: {len(settings.locales)}")
        print(f"Data Directory: {settings.data_dir}\n")

        if args.once:
            print("Running weekly batch once...\n")
            result = asyncio.run(run_weekly_batch(settings, force=args.force))
            print(
                f"\nBatch {result.week_date} complete: {result.generated} generated, "
                f"{result.skipped} skipped, {len(result.errors)} failed "
                f"(pro={result.pro_count}, flash={result.flash_count})\n"
            )
            for error in result.errors:
                print(f"  ❌ {error}")
            return 0 if not result.errors else 1

        print("Starting scheduler...\n")
        start_scheduler(settings)
        return 0

    except KeyboardInterrupt:
        print("\n\nReceived interrupt signal. Shutting down...\n")
        return 0
    except Exception as e:
        logger.error(f"Failed to start: {e}", exc_info=True)
        print(f"\nFailed to start: {e}\n")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sunday Edition: weekly neighborhood synthesis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Sunday Edition {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_init = subparsers.add_parser(
        "init",
        help="Initialize data directory and configuration file",
    )
    parser_init.set_defaults(func=cmd_init)

    parser_config = subparsers.add_parser(
        "config",
        help="Display merged configuration",
    )
    parser_config.set_defaults(func=cmd_config)

    parser_holiday = subparsers.add_parser(
        "holiday",
        help="Show the holiday detected for a country in the coming week",
    )
    parser_holiday.add_argument("--country", required=True, help="Country name, e.g. USA")
    parser_holiday.add_argument("--date", help="Detect as of YYYY-MM-DD (default: today)")
    parser_holiday.set_defaults(func=cmd_holiday)

    parser_generate = subparsers.add_parser(
        "generate",
        help="Generate one locale's Sunday Edition",
    )
    parser_generate.add_argument("--locale", required=True, help="Locale id from config.yaml")
    parser_generate.add_argument("--date", help="Generate as of YYYY-MM-DD (default: now)")
    parser_generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the edition without saving it",
    )
    parser_generate.set_defaults(func=cmd_generate)

    parser_run = subparsers.add_parser(
        "run",
        help="Run the weekly batch on its schedule",
    )
    parser_run.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser_run.add_argument(
        "--once",
        action="store_true",
        help="Run the batch once then exit",
    )
    parser_run.add_argument(
        "--force",
        action="store_true",
        help="Regenerate locales that already have this week's edition",
    )
    parser_run.set_defaults(func=cmd_run)

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
