"""Transaction repository with filtering and aggregation queries."""
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.core.types import CategoryKind, Direction
from yasinga.models.category import Category
from yasinga.models.transaction import Pending, Transaction
from yasinga.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model with filtering and analytics queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    async def get_by_user(self, user_id: UUID, transaction_id: UUID) -> Transaction | None:
        """Get transaction only if it belongs to the specified user."""
        result = await self.db.execute(
            select(Transaction).where(
                Transaction.id == transaction_id, Transaction.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    def _filtered(
        self,
        user_id: UUID,
        direction: Direction | None = None,
        category_id: UUID | None = None,
        pending: bool | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> Select:
        query = select(Transaction).where(Transaction.user_id == user_id)
        if direction is not None:
            query = query.where(Transaction.direction == direction)
        if category_id is not None:
            query = query.where(Transaction.category_id == category_id)
        if pending is not None:
            query = query.where(Transaction.is_pending == pending)
        if start is not None:
            query = query.where(Transaction.occurred_at >= start)
        if end is not None:
            query = query.where(Transaction.occurred_at <= end)
        return query

    async def list_by_user(
        self, user_id: UUID, skip: int = 0, limit: int = 20, **filters
    ) -> tuple[list[Transaction], int]:
        """Get a page of a user's transactions (newest first) and the total count."""
        query = self._filtered(user_id, **filters)

        count_query = query.with_only_columns(func.count(Transaction.id))
        total = (await self.db.execute(count_query)).scalar() or 0

        result = await self.db.execute(
            query.order_by(Transaction.occurred_at.desc()).offset(skip).limit(limit)
        )
        return list(result.scalars().all()), int(total)

    async def get_pending(self, user_id: UUID) -> list[Transaction]:
        """Get transactions still awaiting a category, newest first."""
        result = await self.db.execute(
            self._filtered(user_id, pending=True).order_by(Transaction.occurred_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_date_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[Transaction]:
        """Get transactions within an inclusive range, oldest first, with categories joined."""
        result = await self.db.execute(
            self._filtered(user_id, start=start, end=end).order_by(
                Transaction.occurred_at.asc(), Transaction.created_at.asc()
            )
        )
        return list(result.scalars().all())

    async def reset_category(self, user_id: UUID, category_id: UUID) -> int:
        """Move every transaction in ``category_id`` back to pending.

        Does not commit; callers delete the category in the same unit of work.
        """
        result = await self.db.execute(self._filtered(user_id, category_id=category_id))
        transactions = list(result.scalars().all())
        for txn in transactions:
            txn.apply_state(Pending())
        await self.db.flush()
        return len(transactions)

    async def get_total_by_kind(
        self, user_id: UUID, kind: CategoryKind, start: datetime, end: datetime
    ) -> Decimal:
        """Sum categorized transaction amounts of one category kind in a range."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Transaction.amount), 0))
            .select_from(Transaction)
            .join(Category, Transaction.category_id == Category.id)
            .where(
                Transaction.user_id == user_id,
                Transaction.is_pending == False,
                Category.kind == kind,
                Transaction.occurred_at >= start,
                Transaction.occurred_at < end,
            )
        )
        return Decimal(str(result.scalar_one())).quantize(Decimal("0.01"))

    async def count_by_user(self, user_id: UUID, pending: bool | None = None) -> int:
        query = select(func.count(Transaction.id)).where(Transaction.user_id == user_id)
        if pending is not None:
            query = query.where(Transaction.is_pending == pending)
        return int((await self.db.execute(query)).scalar_one())
