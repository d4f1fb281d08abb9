"""Pydantic schemas for supplier endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str | None = Field(None, max_length=20)
    default_category_id: UUID | None = None


class SupplierUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    phone_number: str | None = Field(None, max_length=20)
    default_category_id: UUID | None = None


class SupplierResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    phone_number: str | None
    default_category_id: UUID | None
    transaction_count: int
    last_transaction_date: datetime | None
    created_at: datetime
