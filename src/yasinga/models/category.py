"""Expense categories owned by a user."""
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from yasinga.core.types import CategoryKind
from yasinga.models.base import BaseModel, enum_column


class Category(BaseModel):
    """A business or personal bucket transactions are sorted into."""

    __tablename__ = "categories"
    # A second seeding race for the same user fails here instead of
    # creating a duplicate default set.
    __table_args__ = (
        UniqueConstraint("user_id", "name", "is_default", name="uq_category_user_name_default"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    kind: Mapped[CategoryKind] = mapped_column(
        enum_column(CategoryKind, "category_kind"),
        nullable=False,
        default=CategoryKind.BUSINESS,
    )
    color: Mapped[str] = mapped_column(String(20), nullable=False, default="#059669")
    icon: Mapped[str] = mapped_column(String(50), nullable=False, default="fas fa-store")
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="categories")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name}, kind={self.kind.value})>"
