"""Aggregation of categorized transactions into a report summary.

``summarize`` is a single pass over already-filtered transactions. Amounts are
summed as ``Decimal`` so totals over thousands of rows keep exact cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Protocol

from yasinga.core.types import CategoryKind, Direction, ReportWindow

CENTS = Decimal("0.01")


class CategoryRef(Protocol):
    name: str
    kind: CategoryKind


class SummarizableTransaction(Protocol):
    direction: Direction
    amount: Any
    category: CategoryRef | None


@dataclass(frozen=True)
class CategorySummary:
    category_name: str
    total_amount: Decimal
    transaction_count: int


@dataclass(frozen=True)
class ReportSummary:
    window: ReportWindow | None
    date_from: datetime | None
    date_to: datetime | None
    total_transactions: int
    total_sent: Decimal
    total_received: Decimal
    business_total: Decimal
    personal_total: Decimal
    top_categories: tuple[CategorySummary, ...]


def summarize(
    transactions: Iterable[SummarizableTransaction],
    window: ReportWindow | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    top_n: int = 5,
) -> ReportSummary:
    """Compute direction, kind and per-category totals.

    Args:
        transactions: Rows already filtered to the report window. Each carries
            its resolved category (name + kind) or None.
        window: Informational label copied into the summary.
        date_from: Start of the window (informational).
        date_to: End of the window (informational).
        top_n: How many categories to keep, highest spend first.

    Returns:
        Immutable ReportSummary. Kind totals count sent transactions only;
        uncategorized rows only reach the direction totals.
    """
    total_transactions = 0
    total_sent = Decimal("0")
    total_received = Decimal("0")
    kind_totals = {CategoryKind.BUSINESS: Decimal("0"), CategoryKind.PERSONAL: Decimal("0")}
    # dicts keep first-seen order, which the stable sort below relies on
    per_category: dict[str, list] = {}

    for txn in transactions:
        total_transactions += 1
        amount = Decimal(str(txn.amount))

        if txn.direction == Direction.SENT:
            total_sent += amount
        else:
            total_received += amount

        category = txn.category
        if category is None:
            continue

        if txn.direction == Direction.SENT:
            kind_totals[CategoryKind(category.kind)] += amount

        stats = per_category.setdefault(category.name, [Decimal("0"), 0])
        stats[0] += amount
        stats[1] += 1

    ranked = sorted(per_category.items(), key=lambda item: item[1][0], reverse=True)
    top = tuple(
        CategorySummary(name, amount.quantize(CENTS), count)
        for name, (amount, count) in ranked[:top_n]
    )

    return ReportSummary(
        window=window,
        date_from=date_from,
        date_to=date_to,
        total_transactions=total_transactions,
        total_sent=total_sent.quantize(CENTS),
        total_received=total_received.quantize(CENTS),
        business_total=kind_totals[CategoryKind.BUSINESS].quantize(CENTS),
        personal_total=kind_totals[CategoryKind.PERSONAL].quantize(CENTS),
        top_categories=top,
    )
