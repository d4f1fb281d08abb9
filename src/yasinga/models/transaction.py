"""M-Pesa transaction model and its categorization lifecycle.

A transaction is either ``Pending`` (awaiting a category) or
``Categorized(category_id)``. The two database columns backing this
(``is_pending`` and ``category_id``) are only ever written together through
``Transaction.apply_state`` and a CHECK constraint rejects a non-pending row
without a category.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yasinga.core.types import Direction
from yasinga.models.base import BaseModel, enum_column


@dataclass(frozen=True)
class Pending:
    """Awaiting categorization (automatic or human)."""


@dataclass(frozen=True)
class Categorized:
    """Has a category, assigned by the classifier or a human."""

    category_id: UUID


CategorizationState = Pending | Categorized


class Transaction(BaseModel):
    """A single M-Pesa payment event."""

    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint(
            "is_pending OR category_id IS NOT NULL",
            name="ck_transactions_categorized_has_category",
        ),
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
        Index("ix_transactions_user_id_occurred_at", "user_id", "occurred_at"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id"), nullable=True, index=True
    )
    transaction_code: Mapped[str | None] = mapped_column(String(20), unique=True, nullable=True)
    direction: Mapped[Direction] = mapped_column(
        enum_column(Direction, "transaction_direction"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    counterparty_name: Mapped[str] = mapped_column(String(255), nullable=False)
    counterparty_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    mpesa_balance: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    transaction_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    source_phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_pending: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    occurred_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="transactions")
    # Joined so that report/listing queries always carry the category name and kind.
    category: Mapped["Category | None"] = relationship("Category", lazy="joined")

    @property
    def state(self) -> CategorizationState:
        if self.is_pending or self.category_id is None:
            return Pending()
        return Categorized(self.category_id)

    def apply_state(self, state: CategorizationState) -> None:
        """Write ``is_pending``/``category_id`` as one unit."""
        if isinstance(state, Categorized):
            self.category_id = state.category_id
            self.is_pending = False
        else:
            self.category = None
            self.category_id = None
            self.is_pending = True

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, direction={self.direction.value}, "
            f"amount={self.amount}, pending={self.is_pending})>"
        )
