"""Per-user SMS monitoring preferences (one row per user)."""
from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yasinga.models.base import BaseModel


class SmsSettings(BaseModel):
    """SMS monitoring settings for a user."""

    __tablename__ = "sms_settings"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    is_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    auto_detect_transactions: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    smart_supplier_recognition: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    auto_categorize_recurring: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    custom_keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    monitor_all_sim_cards: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_sync_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="sms_settings")

    def __repr__(self) -> str:
        return f"<SmsSettings(user_id={self.user_id}, is_enabled={self.is_enabled})>"
