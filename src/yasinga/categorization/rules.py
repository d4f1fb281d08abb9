"""Keyword tables for deterministic transaction categorization.

M-Pesa messages carry no merchant category, so we infer one from the
counterparty name and free-text description. Each rule is a plain data row:

    (group, keywords searched in the match surface, markers searched in
     the user's category names)

Ordering matters: earlier groups win. Business groups are always tried
before personal groups.
"""

from __future__ import annotations

from typing import NamedTuple


class KeywordRule(NamedTuple):
    group: str
    keywords: tuple[str, ...]
    category_markers: tuple[str, ...]

    def matches(self, surface: str) -> bool:
        return any(keyword in surface for keyword in self.keywords)


BUSINESS_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        "suppliers",
        ("supplier", "stock", "inventory", "wholesale", "distributor", "vendor"),
        ("supplier", "stock", "inventory"),
    ),
    KeywordRule(
        "utilities",
        ("electricity", "power", "kplc", "water", "utilities", "rent"),
        ("operating", "utilities", "expense"),
    ),
    KeywordRule(
        "equipment",
        ("equipment", "maintenance", "repair", "machine", "appliance"),
        ("equipment", "maintenance"),
    ),
    KeywordRule(
        "marketing",
        ("marketing", "advertising", "promotion", "social media"),
        ("marketing",),
    ),
    KeywordRule(
        "staff",
        ("salary", "wage", "staff", "employee", "payroll"),
        ("staff", "payroll"),
    ),
    KeywordRule(
        "transport",
        ("delivery", "transport", "fuel", "vehicle", "logistics"),
        ("transport", "delivery"),
    ),
    KeywordRule(
        "licenses",
        ("license", "permit", "registration", "government", "tax"),
        ("license", "regulatory"),
    ),
)

PERSONAL_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        "food",
        ("food", "lunch", "dinner", "restaurant", "cafe", "meal"),
        ("food", "dining"),
    ),
    KeywordRule(
        "transport",
        ("matatu", "uber", "taxi", "bus", "travel"),
        ("transport",),
    ),
    KeywordRule(
        "shopping",
        ("shopping", "clothes", "personal", "grocery", "supermarket"),
        ("shopping", "groceries"),
    ),
    KeywordRule(
        "healthcare",
        ("hospital", "clinic", "medical", "pharmacy", "doctor"),
        ("health", "medical"),
    ),
    KeywordRule(
        "entertainment",
        ("entertainment", "movie", "fun", "leisure", "sport"),
        ("entertainment",),
    ),
)

# Category-name markers used outside the keyword passes.
INCOME_MARKERS: tuple[str, ...] = ("income", "sales", "revenue")
LARGE_AMOUNT_MARKERS: tuple[str, ...] = ("supplier", "stock")
SMALL_AMOUNT_MARKERS: tuple[str, ...] = ("personal", "miscellaneous")
GENERAL_BUSINESS_MARKERS: tuple[str, ...] = ("general", "operating", "expense")


def match_surface(counterparty_name: str | None, description: str | None) -> str:
    """Lowercase concatenation of counterparty and description."""
    return f"{counterparty_name or ''} {description or ''}".lower()
