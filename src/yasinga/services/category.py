"""Category service: user categories and default seeding."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.categorization.defaults import DEFAULT_CATEGORIES
from yasinga.core.exceptions import NotFoundError
from yasinga.models.category import Category
from yasinga.repositories.category import CategoryRepository
from yasinga.repositories.transaction import TransactionRepository
from yasinga.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service layer for category operations."""

    def __init__(self, db: AsyncSession):
        """Initialize category service with database session.

        Args:
            db: Database session
        """
        self.db = db
        self.category_repo = CategoryRepository(db)
        self.transaction_repo = TransactionRepository(db)

    async def seed_default_categories(self, user_id: UUID) -> list[Category]:
        """Insert the default category set for a user.

        Callers guard this with ``count == 0``; the (user, name, is_default)
        unique constraint rejects a concurrent second seed.
        """
        categories = [
            Category(
                user_id=user_id,
                name=default.name,
                kind=default.kind,
                color=default.color,
                icon=default.icon,
                is_default=True,
            )
            for default in DEFAULT_CATEGORIES
        ]
        await self.category_repo.create_many(categories)
        logger.info(
            "Seeded default categories",
            extra={"user_id": str(user_id), "count": len(categories)},
        )
        return await self.category_repo.get_all_by_user(user_id)

    async def ensure_defaults(self, user_id: UUID) -> list[Category]:
        """Return the user's categories, seeding the defaults if they have none."""
        if await self.category_repo.count_by_user(user_id) == 0:
            return await self.seed_default_categories(user_id)
        return await self.category_repo.get_all_by_user(user_id)

    async def get_category(self, user_id: UUID, category_id: UUID) -> Category:
        category = await self.category_repo.get_by_user(user_id, category_id)
        if category is None:
            raise NotFoundError("CAT_001", details={"category_id": str(category_id)})
        return category

    async def create_category(self, user_id: UUID, data: CategoryCreate) -> Category:
        return await self.category_repo.create(Category(user_id=user_id, **data.model_dump()))

    async def update_category(
        self, user_id: UUID, category_id: UUID, data: CategoryUpdate
    ) -> Category:
        category = await self.get_category(user_id, category_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(category, key, value)
        return await self.category_repo.save(category)

    async def delete_category(self, user_id: UUID, category_id: UUID) -> int:
        """Delete a category; its transactions go back to pending.

        Returns:
            Number of transactions that became pending
        """
        category = await self.get_category(user_id, category_id)
        reset = await self.transaction_repo.reset_category(user_id, category_id)
        await self.category_repo.delete(category)
        logger.info(
            "Deleted category",
            extra={"user_id": str(user_id), "category_id": str(category_id), "reset": reset},
        )
        return reset
