"""Rule-based auto-categorization of M-Pesa transactions.

Given a transaction draft and the owning user's categories, pick at most one
category. The decision is a pure function of its inputs:

1. received money goes to a business income category (never personal)
2. business keyword groups, then personal keyword groups
3. amount heuristics (large -> supplier/stock, small -> personal misc)
4. general business fallback, then the first business/personal category

Within every step the first category in the supplied order wins. An empty or
unsuitable category set yields ``None``; nothing here raises for "no match".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Protocol, Sequence

from yasinga.categorization.rules import (
    BUSINESS_RULES,
    GENERAL_BUSINESS_MARKERS,
    INCOME_MARKERS,
    LARGE_AMOUNT_MARKERS,
    PERSONAL_RULES,
    SMALL_AMOUNT_MARKERS,
    KeywordRule,
    match_surface,
)
from yasinga.core.types import CategoryKind, Direction

logger = logging.getLogger(__name__)

LARGE_AMOUNT = Decimal("5000")
SMALL_AMOUNT = Decimal("500")


class CategoryLike(Protocol):
    id: Any
    name: str
    kind: CategoryKind


@dataclass(frozen=True)
class TransactionDraft:
    """The transaction fields the classifier looks at."""

    direction: Direction
    amount: Decimal
    counterparty_name: str
    description: str | None = None


@dataclass(frozen=True)
class Decision:
    """Chosen category id plus the step (and keyword group) that chose it."""

    category_id: Any | None
    step: str
    group: str | None = None


def _first_named(categories: Sequence[CategoryLike], markers: Iterable[str]) -> CategoryLike | None:
    markers = tuple(markers)
    for category in categories:
        name = category.name.lower()
        if any(marker in name for marker in markers):
            return category
    return None


def _keyword_pass(
    surface: str, rules: Sequence[KeywordRule], categories: Sequence[CategoryLike]
) -> tuple[CategoryLike, KeywordRule] | None:
    for rule in rules:
        if not rule.matches(surface):
            continue
        category = _first_named(categories, rule.category_markers)
        if category is not None:
            return category, rule
    return None


def explain(
    draft: TransactionDraft,
    categories: Iterable[CategoryLike],
    large_amount: Decimal = LARGE_AMOUNT,
    small_amount: Decimal = SMALL_AMOUNT,
) -> Decision:
    """Classify ``draft`` and report which rule produced the result."""
    categories = list(categories)
    business = [c for c in categories if c.kind == CategoryKind.BUSINESS]
    personal = [c for c in categories if c.kind == CategoryKind.PERSONAL]

    if draft.direction == Direction.RECEIVED:
        income = _first_named(business, INCOME_MARKERS)
        if income is not None:
            return Decision(income.id, "income")
        if business:
            return Decision(business[0].id, "income_fallback")
        return Decision(None, "unresolved")

    surface = match_surface(draft.counterparty_name, draft.description)

    hit = _keyword_pass(surface, BUSINESS_RULES, business)
    if hit is not None:
        category, rule = hit
        return Decision(category.id, "business_keyword", rule.group)

    hit = _keyword_pass(surface, PERSONAL_RULES, personal)
    if hit is not None:
        category, rule = hit
        return Decision(category.id, "personal_keyword", rule.group)

    amount = Decimal(draft.amount)
    if amount >= large_amount:
        category = _first_named(business, LARGE_AMOUNT_MARKERS)
        if category is not None:
            return Decision(category.id, "large_amount")
    elif amount <= small_amount:
        category = _first_named(personal, SMALL_AMOUNT_MARKERS)
        if category is not None:
            return Decision(category.id, "small_amount")

    category = _first_named(business, GENERAL_BUSINESS_MARKERS)
    if category is not None:
        return Decision(category.id, "general_business")
    if business:
        return Decision(business[0].id, "first_business")
    if personal:
        return Decision(personal[0].id, "first_personal")
    return Decision(None, "unresolved")


def classify(
    draft: TransactionDraft,
    categories: Iterable[CategoryLike],
    large_amount: Decimal = LARGE_AMOUNT,
    small_amount: Decimal = SMALL_AMOUNT,
) -> Any | None:
    """Return the id of the category ``draft`` belongs to, or None."""
    decision = explain(draft, categories, large_amount, small_amount)
    logger.debug(
        "Classifier decision",
        extra={"step": decision.step, "group": decision.group},
    )
    return decision.category_id
