"""Response metadata shared by several endpoints."""

from pydantic import BaseModel, Field


class PaginationMeta(BaseModel):
    """Pagination metadata."""

    page: int = Field(description="Current page number (1-indexed)")
    limit: int = Field(description="Items per page")
    total: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")


class MoneyMeta(BaseModel):
    """How to interpret monetary fields in a response."""

    currency: str = Field(description="ISO currency code (e.g., KES)")
    minor_unit: int = Field(
        description="Number of decimal places amounts are kept to (2 = cents)"
    )
