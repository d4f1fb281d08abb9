"""Scheduled report job - the entry point for weekly/monthly runs.

This is what cron calls:

    python -m yasinga.scheduler weekly --format pdf
    python -m yasinga.scheduler monthly --format csv
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from yasinga.api.middleware.logging import setup_logging
from yasinga.config import settings
from yasinga.core.types import ReportFormat, ReportWindow
from yasinga.db.session import AsyncSessionLocal
from yasinga.repositories.user import UserRepository
from yasinga.services.report import ReportService

logger = logging.getLogger(__name__)

USER_BATCH_SIZE = 100


async def _active_user_ids(session_factory: async_sessionmaker[AsyncSession]) -> list:
    user_ids = []
    async with session_factory() as db:
        repo = UserRepository(db)
        skip = 0
        while True:
            users = await repo.get_active_users(skip=skip, limit=USER_BATCH_SIZE)
            user_ids.extend(user.id for user in users)
            if len(users) < USER_BATCH_SIZE:
                return user_ids
            skip += USER_BATCH_SIZE


async def run(
    window: ReportWindow,
    fmt: ReportFormat = ReportFormat.PDF,
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
    reports_dir: Path | None = None,
    now: datetime | None = None,
) -> tuple[int, int]:
    """
    Save a report for every active user.

    Each user is processed in their own session; a failure for one user is
    logged and the batch moves on.

    Returns:
        (succeeded, failed) user counts
    """
    window = ReportWindow(window)
    fmt = ReportFormat(fmt)
    succeeded = failed = 0

    user_ids = await _active_user_ids(session_factory)
    logger.info(f"Starting {window.value} report run for {len(user_ids)} users")

    for user_id in user_ids:
        try:
            async with session_factory() as db:
                service = ReportService(db, reports_dir=reports_dir)
                saved = await service.save_report(user_id, window, fmt, now=now)
            succeeded += 1
            logger.info("Saved scheduled report", extra={"user_id": str(user_id), "file": saved.filename})
        except Exception:
            failed += 1
            logger.exception("Scheduled report failed", extra={"user_id": str(user_id), "window": window.value})

    logger.info(f"Finished {window.value} report run: {succeeded} saved, {failed} failed")
    return succeeded, failed


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Yasinga scheduled reports")
    parser.add_argument("window", choices=[w.value for w in ReportWindow], help="Report window")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=[f.value for f in ReportFormat],
        default=ReportFormat.PDF.value,
        help="Report file format (default: pdf)",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, json_output=settings.app_env == "production")
    _, failed = asyncio.run(run(ReportWindow(args.window), ReportFormat(args.fmt)))
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
