"""Supplier repository with user-scoped queries."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.models.supplier import Supplier
from yasinga.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):
    """Repository for Supplier model with user-scoped security."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Supplier)

    async def get_by_user(self, user_id: UUID, supplier_id: UUID) -> Supplier | None:
        """Get supplier only if it belongs to the specified user."""
        result = await self.db.execute(
            select(Supplier).where(Supplier.id == supplier_id, Supplier.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_all_by_user(self, user_id: UUID, search: str | None = None) -> list[Supplier]:
        """Get a user's suppliers, most recently paid first.

        ``search`` keeps suppliers whose name contains it (case-insensitive).
        """
        query = select(Supplier).where(Supplier.user_id == user_id)
        if search:
            query = query.where(Supplier.name.ilike(f"%{search.strip()}%"))
        result = await self.db.execute(
            query.order_by(Supplier.last_transaction_date.desc().nulls_last(), Supplier.name)
        )
        return list(result.scalars().all())
