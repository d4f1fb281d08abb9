"""Category repository with user-scoped queries."""
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.core.types import CategoryKind
from yasinga.models.category import Category
from yasinga.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model with user-scoped security."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def get_by_user(self, user_id: UUID, category_id: UUID) -> Category | None:
        """Get category only if it belongs to the specified user."""
        result = await self.db.execute(
            select(Category).where(Category.id == category_id, Category.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_all_by_user(
        self, user_id: UUID, kind: CategoryKind | None = None
    ) -> list[Category]:
        """Get a user's categories ordered by name.

        This order is also the order the classifier breaks ties in.
        """
        query = select(Category).where(Category.user_id == user_id)
        if kind is not None:
            query = query.where(Category.kind == kind)
        result = await self.db.execute(query.order_by(Category.name, Category.id))
        return list(result.scalars().all())

    async def count_by_user(self, user_id: UUID) -> int:
        result = await self.db.execute(
            select(func.count(Category.id)).where(Category.user_id == user_id)
        )
        return int(result.scalar_one())

    async def create_many(self, categories: list[Category]) -> list[Category]:
        """Insert several categories in one transaction."""
        self.db.add_all(categories)
        await self.db.commit()
        for category in categories:
            await self.db.refresh(category)
        return categories
