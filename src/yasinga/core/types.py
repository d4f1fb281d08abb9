"""Shared enumerations used by the models, schemas and the pure core."""

from enum import Enum


class Direction(str, Enum):
    """Whether money left the user (sent) or arrived (received)."""

    SENT = "sent"
    RECEIVED = "received"


class CategoryKind(str, Enum):
    """The two top-level buckets every category belongs to."""

    BUSINESS = "business"
    PERSONAL = "personal"


class ReportWindow(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ReportFormat(str, Enum):
    PDF = "pdf"
    CSV = "csv"
