"""Pydantic schemas for reports and dashboard statistics."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from yasinga.core.types import ReportWindow
from yasinga.schemas.common import MoneyMeta


class CategorySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category_name: str
    total_amount: Decimal
    transaction_count: int


class ReportSummaryResponse(BaseModel):
    """Totals for a report window."""

    model_config = ConfigDict(from_attributes=True)

    window: ReportWindow | None
    date_from: datetime | None
    date_to: datetime | None
    total_transactions: int
    total_sent: Decimal
    total_received: Decimal
    business_total: Decimal = Field(description="Sent amounts in business categories")
    personal_total: Decimal = Field(description="Sent amounts in personal categories")
    top_categories: list[CategorySummaryResponse] = Field(
        description="Highest-spend categories, at most five"
    )
    money: MoneyMeta | None = None


class ReportFileResponse(BaseModel):
    filename: str
    size_bytes: int
    modified_at: datetime


class ReportFileListResult(BaseModel):
    reports: list[ReportFileResponse]
    total: int


class DashboardStats(BaseModel):
    """Today's totals and categorization backlog."""

    today_business: Decimal
    today_personal: Decimal
    pending_count: int
    total_transactions: int
    money: MoneyMeta
