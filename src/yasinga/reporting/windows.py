"""Date ranges covered by weekly and monthly reports."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from yasinga.core.types import ReportWindow


def report_range(
    window: ReportWindow, now: datetime | None = None
) -> tuple[datetime, datetime]:
    """Return the inclusive ``(start, end)`` range for a report window.

    - weekly: the 7 days ending at ``now``
    - monthly: from midnight on the first day of the previous calendar month
      up to ``now``, so a run on the 1st covers the whole previous month
    """
    end = now or datetime.now(timezone.utc)
    window = ReportWindow(window)

    if window == ReportWindow.WEEKLY:
        return end - timedelta(days=7), end

    if end.month == 1:
        year, month = end.year - 1, 12
    else:
        year, month = end.year, end.month - 1
    start = end.replace(year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0)
    return start, end
