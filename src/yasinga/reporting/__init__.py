"""Report summaries and their CSV/PDF renderings."""

from .renderers import RenderedReport, render
from .summary import CategorySummary, ReportSummary, summarize
from .windows import report_range

__all__ = [
    "CategorySummary",
    "RenderedReport",
    "ReportSummary",
    "render",
    "report_range",
    "summarize",
]
