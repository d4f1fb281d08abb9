"""Report service: window summaries, rendered artifacts and saved files."""
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.config import settings
from yasinga.core.exceptions import NotFoundError, ReportError, ValidationError
from yasinga.core.types import ReportFormat, ReportWindow
from yasinga.models.transaction import Transaction
from yasinga.reporting import RenderedReport, ReportSummary, render, report_range, summarize
from yasinga.repositories.transaction import TransactionRepository
from yasinga.repositories.user import UserRepository
from yasinga.schemas.report import ReportFileResponse

logger = logging.getLogger(__name__)

SAFE_FILENAME = re.compile(r"^[A-Za-z0-9_.-]+\.(csv|pdf)$")


class ReportService:
    """Service layer for report generation and the saved-report directory."""

    def __init__(self, db: AsyncSession, reports_dir: Path | None = None):
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.user_repo = UserRepository(db)
        self.reports_dir = Path(reports_dir or settings.reports_dir)

    async def _load(
        self, user_id: UUID, window: ReportWindow, now: datetime | None = None
    ) -> tuple[ReportSummary, list[Transaction]]:
        start, end = report_range(window, now)
        transactions = await self.transaction_repo.get_by_date_range(user_id, start, end)
        summary = summarize(
            transactions,
            window=ReportWindow(window),
            date_from=start,
            date_to=end,
            top_n=settings.report_top_n,
        )
        return summary, transactions

    async def generate_report(
        self, user_id: UUID, window: ReportWindow, now: datetime | None = None
    ) -> ReportSummary:
        """Summarize the user's transactions for a weekly or monthly window."""
        summary, _ = await self._load(user_id, window, now)
        logger.info(
            "Generated report summary",
            extra={
                "user_id": str(user_id),
                "window": summary.window.value,
                "transactions": summary.total_transactions,
            },
        )
        return summary

    async def render_report(
        self,
        user_id: UUID,
        window: ReportWindow,
        fmt: ReportFormat,
        now: datetime | None = None,
    ) -> RenderedReport:
        """Build the downloadable CSV or PDF artifact for a window."""
        summary, transactions = await self._load(user_id, window, now)
        user = await self.user_repo.get_by_id(user_id)
        try:
            return render(
                summary,
                transactions,
                fmt,
                user_email=user.email if user else None,
                owner=str(user_id),
            )
        except (OSError, ValueError) as e:
            logger.error(
                "Report rendering failed",
                extra={"user_id": str(user_id), "format": str(fmt), "error": str(e)},
            )
            raise ReportError("RPT_003", details={"format": str(fmt), "error": str(e)})

    async def save_report(
        self,
        user_id: UUID,
        window: ReportWindow,
        fmt: ReportFormat,
        now: datetime | None = None,
    ) -> ReportFileResponse:
        """Render a report and write it into the reports directory."""
        rendered = await self.render_report(user_id, window, fmt, now)
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        path = self.reports_dir / rendered.filename
        path.write_bytes(rendered.content)
        logger.info("Saved report", extra={"user_id": str(user_id), "file": rendered.filename})
        return self._describe(path)

    def _describe(self, path: Path) -> ReportFileResponse:
        stat = path.stat()
        return ReportFileResponse(
            filename=path.name,
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    @staticmethod
    def _owned_by(filename: str, user_id: UUID) -> bool:
        return f"_report_{user_id}_" in filename

    def list_reports(self, user_id: UUID) -> list[ReportFileResponse]:
        """The user's saved reports, most recently written first."""
        if not self.reports_dir.is_dir():
            return []
        files = [
            self._describe(path)
            for path in self.reports_dir.iterdir()
            if path.is_file()
            and SAFE_FILENAME.match(path.name)
            and self._owned_by(path.name, user_id)
        ]
        return sorted(files, key=lambda f: f.modified_at, reverse=True)

    def _resolve(self, filename: str) -> Path:
        if not SAFE_FILENAME.match(filename):
            raise ValidationError("RPT_002", details={"filename": filename})
        root = self.reports_dir.resolve()
        path = (root / filename).resolve()
        if path.parent != root:
            raise ValidationError("RPT_002", details={"filename": filename})
        return path

    def delete_report(self, user_id: UUID, filename: str) -> None:
        """Delete one of the user's saved reports by file name.

        Raises:
            ValidationError: If the name could point outside the reports directory
            NotFoundError: If the user has no such report
        """
        path = self._resolve(filename)
        if not (self._owned_by(path.name, user_id) and path.is_file()):
            raise NotFoundError("RPT_001", details={"filename": filename})
        path.unlink()
        logger.info("Deleted report", extra={"user_id": str(user_id), "file": filename})
