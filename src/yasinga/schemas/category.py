"""Pydantic schemas for category endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from yasinga.core.types import CategoryKind


class CategoryCreate(BaseModel):
    """Request to create a user category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    kind: CategoryKind = Field(CategoryKind.BUSINESS, description="business or personal")
    color: str = Field("#059669", max_length=20, description="Display color")
    icon: str = Field("fas fa-store", max_length=50, description="Display icon")


class CategoryUpdate(BaseModel):
    """Partial category update; omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=100)
    kind: CategoryKind | None = None
    color: str | None = Field(None, max_length=20)
    icon: str | None = Field(None, max_length=50)


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    kind: CategoryKind
    color: str
    icon: str
    is_default: bool
    created_at: datetime


class CategoryRef(BaseModel):
    """The parts of a category embedded in a transaction."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    kind: CategoryKind
