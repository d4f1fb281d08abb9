"""Known suppliers a business pays regularly."""
from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yasinga.models.base import BaseModel


class Supplier(BaseModel):
    """Supplier with an optional default category for its payments."""

    __tablename__ = "suppliers"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    default_category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    transaction_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_transaction_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    user: Mapped["User"] = relationship("User", back_populates="suppliers")

    def __repr__(self) -> str:
        return f"<Supplier(id={self.id}, name={self.name})>"
