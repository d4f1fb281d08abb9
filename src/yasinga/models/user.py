"""User model for authentication and data ownership."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yasinga.models.base import BaseModel


class User(BaseModel):
    """User model representing a business owner."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    business_phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    personal_phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Rely on DB-level ON DELETE CASCADE; prevent SQLAlchemy from NULLing FKs on delete.
    categories: Mapped[list["Category"]] = relationship(
        "Category", back_populates="user", lazy="noload", passive_deletes="all"
    )
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="user", lazy="noload", passive_deletes="all"
    )
    suppliers: Mapped[list["Supplier"]] = relationship(
        "Supplier", back_populates="user", lazy="noload", passive_deletes="all"
    )
    sms_settings: Mapped["SmsSettings | None"] = relationship(
        "SmsSettings", back_populates="user", lazy="noload", passive_deletes="all", uselist=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, is_active={self.is_active})>"
