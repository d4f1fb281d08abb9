"""Pydantic schemas for transaction endpoints."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from yasinga.core.types import Direction
from yasinga.schemas.category import CategoryRef
from yasinga.schemas.common import MoneyMeta, PaginationMeta


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TransactionCreate(BaseModel):
    """An already-parsed M-Pesa transaction.

    When ``category_id`` is omitted the transaction is auto-categorized.
    """

    direction: Direction = Field(..., description="sent or received")
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Amount in KES")
    counterparty_name: str = Field(..., min_length=1, max_length=255, description="Other party")
    counterparty_phone: str | None = Field(None, max_length=20)
    description: str | None = Field(None, description="Free-text description")
    occurred_at: datetime = Field(..., description="When the payment happened")
    category_id: UUID | None = Field(None, description="Explicit category (skips auto-categorization)")
    transaction_code: str | None = Field(None, max_length=20, description="M-Pesa confirmation code")
    mpesa_balance: Decimal | None = Field(None, max_digits=12, decimal_places=2)
    transaction_cost: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    source_phone_number: str | None = Field(None, max_length=20, description="SIM the message came from")

    @field_validator("occurred_at")
    @classmethod
    def normalize_occurred_at(cls, value: datetime) -> datetime:
        return _as_utc(value)


class TransactionUpdate(BaseModel):
    """Mutable parts of a transaction.

    Direction, amount and counterparty are facts of the payment and cannot be
    changed once recorded.
    """

    model_config = ConfigDict(extra="forbid")

    category_id: UUID | None = Field(None, description="Re-categorize the transaction")
    description: str | None = None
    counterparty_phone: str | None = Field(None, max_length=20)


class CategorizeRequest(BaseModel):
    """Quick categorization of a single transaction."""

    category_id: UUID


class TransactionResponse(BaseModel):
    """Transaction data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    direction: Direction
    amount: Decimal
    counterparty_name: str
    counterparty_phone: str | None
    description: str | None
    transaction_code: str | None
    mpesa_balance: Decimal | None
    transaction_cost: Decimal | None
    source_phone_number: str | None
    occurred_at: datetime
    is_pending: bool
    category_id: UUID | None
    category: CategoryRef | None
    created_at: datetime


class TransactionListResult(BaseModel):
    """Paginated list of transactions."""

    transactions: list[TransactionResponse]
    pagination: PaginationMeta
    money: MoneyMeta
