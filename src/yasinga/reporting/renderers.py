"""CSV and PDF rendering of a report summary.

Renderers only read the summary and the transaction rows; layout is not a
contract and may change freely.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Sequence

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from yasinga.core.types import Direction, ReportFormat
from yasinga.reporting.summary import ReportSummary

# Only the first rows fit the PDF layout; the CSV always has every row.
PDF_MAX_TRANSACTIONS = 25

MEDIA_TYPES = {
    ReportFormat.CSV: "text/csv",
    ReportFormat.PDF: "application/pdf",
}


@dataclass(frozen=True)
class RenderedReport:
    filename: str
    media_type: str
    content: bytes


def format_money(amount: Any, currency_label: str = "KSh") -> str:
    return f"{currency_label} {Decimal(str(amount)):,.2f}"


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def _period(summary: ReportSummary) -> str:
    return f"{_format_date(summary.date_from)} - {_format_date(summary.date_to)}"


def _window_label(summary: ReportSummary) -> str:
    return summary.window.value if summary.window else "custom"


def report_filename(
    summary: ReportSummary, fmt: ReportFormat, owner: str | None = None, today: date | None = None
) -> str:
    """Name of the artifact; ``owner`` keeps reports of different users apart."""
    today = today or datetime.now(timezone.utc).date()
    owner_part = f"{owner}_" if owner else ""
    return f"yasinga_{_window_label(summary)}_report_{owner_part}{today.isoformat()}.{ReportFormat(fmt).value}"


def _transaction_row(txn: Any) -> list[str]:
    direction = "Sent" if txn.direction == Direction.SENT else "Received"
    category = txn.category.name if txn.category is not None else "Uncategorized"
    return [
        _format_date(txn.occurred_at),
        direction,
        format_money(txn.amount),
        txn.counterparty_name,
        category,
        txn.description or "",
    ]


def render_csv(summary: ReportSummary, transactions: Sequence[Any], user_email: str | None = None) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow([f"Yasinga {_window_label(summary).capitalize()} Expense Report"])
    if user_email:
        writer.writerow(["User", user_email])
    writer.writerow(["Period", _period(summary)])
    writer.writerow(["Generated", datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")])
    writer.writerow([])

    writer.writerow(["SUMMARY"])
    writer.writerow(["Total Transactions", summary.total_transactions])
    writer.writerow(["Total Sent", format_money(summary.total_sent)])
    writer.writerow(["Total Received", format_money(summary.total_received)])
    writer.writerow(["Business Expenses", format_money(summary.business_total)])
    writer.writerow(["Personal Expenses", format_money(summary.personal_total)])
    writer.writerow([])

    if summary.top_categories:
        writer.writerow(["TOP CATEGORIES"])
        writer.writerow(["Rank", "Category", "Amount", "Transactions"])
        for rank, item in enumerate(summary.top_categories, start=1):
            writer.writerow([rank, item.category_name, format_money(item.total_amount), item.transaction_count])
        writer.writerow([])

    writer.writerow(["TRANSACTIONS"])
    writer.writerow(["Date", "Type", "Amount", "Other Party", "Category", "Description"])
    for txn in transactions:
        writer.writerow(_transaction_row(txn))

    return buffer.getvalue().encode("utf-8")


def _table(data: list[list[Any]], col_widths: list[float], header: bool) -> Table:
    table = Table(data, colWidths=col_widths)
    style = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
    ]
    if header:
        style += [
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#059669")),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ]
    else:
        style.append(("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"))
    table.setStyle(TableStyle(style))
    return table


def render_pdf(summary: ReportSummary, transactions: Sequence[Any], user_email: str | None = None) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4)
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=20,
        textColor=colors.HexColor("#059669"),
        alignment=TA_CENTER,
        spaceAfter=20,
    )

    elements: list[Any] = [
        Paragraph("Yasinga Expense Report", title_style),
        Paragraph(f"{_window_label(summary).capitalize()} Report", styles["Heading2"]),
    ]

    info = [["Period:", _period(summary)]]
    if user_email:
        info.insert(0, ["User:", user_email])
    info.append(["Generated:", datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")])
    elements += [_table(info, [1.5 * inch, 4.5 * inch], header=False), Spacer(1, 0.3 * inch)]

    elements.append(Paragraph("Summary", styles["Heading2"]))
    totals = [
        ["Total Transactions", str(summary.total_transactions)],
        ["Total Sent", format_money(summary.total_sent)],
        ["Total Received", format_money(summary.total_received)],
        ["Business Expenses", format_money(summary.business_total)],
        ["Personal Expenses", format_money(summary.personal_total)],
    ]
    elements += [_table(totals, [2.5 * inch, 3.5 * inch], header=False), Spacer(1, 0.3 * inch)]

    if summary.top_categories:
        elements.append(Paragraph("Top Categories", styles["Heading2"]))
        rows = [["#", "Category", "Amount", "Transactions"]]
        for rank, item in enumerate(summary.top_categories, start=1):
            rows.append([str(rank), item.category_name, format_money(item.total_amount), str(item.transaction_count)])
        elements.append(_table(rows, [0.4 * inch, 3 * inch, 1.6 * inch, 1 * inch], header=True))

    if transactions:
        elements += [PageBreak(), Paragraph("Recent Transactions", styles["Heading2"])]
        rows = [["Date", "Type", "Amount", "Other Party", "Category"]]
        for txn in transactions[:PDF_MAX_TRANSACTIONS]:
            rows.append(_transaction_row(txn)[:5])
        elements.append(
            _table(rows, [0.9 * inch, 0.8 * inch, 1.2 * inch, 1.8 * inch, 1.6 * inch], header=True)
        )
        remaining = len(transactions) - PDF_MAX_TRANSACTIONS
        if remaining > 0:
            elements += [Spacer(1, 0.2 * inch), Paragraph(f"... and {remaining} more transactions", styles["Normal"])]

    doc.build(elements)
    return buffer.getvalue()


def render(
    summary: ReportSummary,
    transactions: Sequence[Any],
    fmt: ReportFormat,
    user_email: str | None = None,
    owner: str | None = None,
) -> RenderedReport:
    """Render ``summary`` and its rows into a downloadable artifact."""
    fmt = ReportFormat(fmt)
    if fmt == ReportFormat.CSV:
        content = render_csv(summary, transactions, user_email)
    else:
        content = render_pdf(summary, transactions, user_email)
    return RenderedReport(
        filename=report_filename(summary, fmt, owner=owner),
        media_type=MEDIA_TYPES[fmt],
        content=content,
    )
