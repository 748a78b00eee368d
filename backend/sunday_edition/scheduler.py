"""Weekly batch scheduling using APScheduler."""

import asyncio
import logging
from typing import NoReturn

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from sunday_edition.batch import run_weekly_batch
from sunday_edition.config import Settings

logger = logging.getLogger(__name__)


def weekly_batch_job(settings: Settings) -> None:
    """Run one weekly batch; failures are logged so the scheduler keeps running."""
    try:
        result = asyncio.run(run_weekly_batch(settings))
        logger.info(
            f"Weekly batch {result.week_date}: generated={result.generated} "
            f"skipped={result.skipped} errors={len(result.errors)}"
        )
    except Exception as e:
        logger.error(f"Weekly batch failed: {e}")


def build_trigger(settings: Settings) -> CronTrigger:
    schedule = settings.scheduler
    return CronTrigger(
        day_of_week=schedule.day_of_week,
        hour=schedule.hour,
        minute=schedule.minute,
        timezone=schedule.timezone,
    )


def start_scheduler(settings: Settings) -> NoReturn:
    """Start the APScheduler with the weekly edition job."""
    scheduler = BlockingScheduler()
    schedule = settings.scheduler

    scheduler.add_job(
        weekly_batch_job,
        build_trigger(settings),
        args=[settings],
        id="sunday-edition",
        name="Sunday Edition: Weekly Batch",
    )
    logger.info(
        f"Registered job: Sunday Edition ({schedule.day_of_week} "
        f"{schedule.hour:02d}:{schedule.minute:02d} {schedule.timezone})"
    )

    try:
        logger.info("✓ Scheduler starting...")
        logger.info("Press Ctrl+C to stop\n")

        scheduler.start()

    except (KeyboardInterrupt, SystemExit):
        logger.info("\nReceived interrupt signal")
        scheduler.shutdown()
        logger.info("✓ Scheduler stopped cleanly")
