"""Default category set seeded for users who have none.

Kept as static data so it can be versioned and tested independently of the
classifier. The names carry the markers most keyword groups in ``rules``
look for.
"""

from __future__ import annotations

from typing import NamedTuple

from yasinga.core.types import CategoryKind


class DefaultCategory(NamedTuple):
    name: str
    kind: CategoryKind
    color: str
    icon: str


DEFAULT_CATEGORIES: tuple[DefaultCategory, ...] = (
    # Business (restaurant oriented)
    DefaultCategory("Supplier Payments", CategoryKind.BUSINESS, "#059669", "fas fa-truck"),
    DefaultCategory("Food & Beverage Stock", CategoryKind.BUSINESS, "#16a34a", "fas fa-utensils"),
    DefaultCategory("Equipment & Maintenance", CategoryKind.BUSINESS, "#dc2626", "fas fa-tools"),
    DefaultCategory("Operating Expenses", CategoryKind.BUSINESS, "#ea580c", "fas fa-receipt"),
    DefaultCategory("Staff Payments", CategoryKind.BUSINESS, "#7c2d12", "fas fa-users"),
    DefaultCategory("Utilities & Rent", CategoryKind.BUSINESS, "#1e40af", "fas fa-home"),
    DefaultCategory("Marketing & Advertising", CategoryKind.BUSINESS, "#7c3aed", "fas fa-megaphone"),
    DefaultCategory("Licenses & Permits", CategoryKind.BUSINESS, "#374151", "fas fa-certificate"),
    DefaultCategory("Business Income", CategoryKind.BUSINESS, "#059669", "fas fa-money-bill-wave"),
    # Personal
    DefaultCategory("Personal Food & Dining", CategoryKind.PERSONAL, "#65a30d", "fas fa-hamburger"),
    DefaultCategory("Personal Transportation", CategoryKind.PERSONAL, "#ca8a04", "fas fa-car"),
    DefaultCategory("Healthcare & Medical", CategoryKind.PERSONAL, "#dc2626", "fas fa-heartbeat"),
    DefaultCategory("Shopping & Groceries", CategoryKind.PERSONAL, "#0891b2", "fas fa-shopping-cart"),
    DefaultCategory("Entertainment & Leisure", CategoryKind.PERSONAL, "#7c3aed", "fas fa-gamepad"),
    DefaultCategory("Personal Miscellaneous", CategoryKind.PERSONAL, "#6b7280", "fas fa-user"),
)
