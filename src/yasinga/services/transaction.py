"""Transaction service: recording, auto-categorization and lookups."""
import logging
from datetime import datetime, time, timedelta, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.categorization import TransactionDraft, explain
from yasinga.config import settings
from yasinga.core.exceptions import NotFoundError, ValidationError
from yasinga.core.types import CategoryKind, Direction
from yasinga.models.category import Category
from yasinga.models.transaction import Categorized, Pending, Transaction
from yasinga.repositories.category import CategoryRepository
from yasinga.repositories.transaction import TransactionRepository
from yasinga.schemas.common import MoneyMeta
from yasinga.schemas.report import DashboardStats
from yasinga.schemas.transaction import TransactionCreate, TransactionUpdate
from yasinga.services.category import CategoryService

logger = logging.getLogger(__name__)


def money_meta() -> MoneyMeta:
    return MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit)


class TransactionService:
    """Service layer for transaction operations."""

    def __init__(self, db: AsyncSession):
        """Initialize transaction service with database session.

        Args:
            db: Database session
        """
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.category_repo = CategoryRepository(db)
        self.category_service = CategoryService(db)

    async def _owned_category(self, user_id: UUID, category_id: UUID) -> Category:
        category = await self.category_repo.get_by_user(user_id, category_id)
        if category is None:
            raise ValidationError("TXN_002", details={"category_id": str(category_id)})
        return category

    async def get_transaction(self, user_id: UUID, transaction_id: UUID) -> Transaction:
        txn = await self.transaction_repo.get_by_user(user_id, transaction_id)
        if txn is None:
            raise NotFoundError("TXN_001", details={"transaction_id": str(transaction_id)})
        return txn

    async def auto_categorize(self, user_id: UUID, txn: Transaction) -> None:
        """Run the classifier over the user's categories and apply the result.

        The user's default categories are seeded first if they have none. A
        transaction the classifier cannot place stays pending.
        """
        categories = await self.category_service.ensure_defaults(user_id)
        draft = TransactionDraft(
            direction=txn.direction,
            amount=txn.amount,
            counterparty_name=txn.counterparty_name,
            description=txn.description,
        )
        decision = explain(
            draft,
            categories,
            large_amount=settings.classifier_large_amount,
            small_amount=settings.classifier_small_amount,
        )

        if decision.category_id is None:
            txn.apply_state(Pending())
        else:
            txn.apply_state(Categorized(decision.category_id))

        logger.debug(
            "Transaction auto-categorized",
            extra={
                "user_id": str(user_id),
                "step": decision.step,
                "group": decision.group,
                "pending": txn.is_pending,
            },
        )

    async def create_transaction(self, user_id: UUID, data: TransactionCreate) -> Transaction:
        """Record a parsed transaction.

        An explicit ``category_id`` must be one of the user's categories;
        otherwise the transaction is auto-categorized.
        """
        txn = Transaction(user_id=user_id, **data.model_dump(exclude={"category_id"}))

        if data.category_id is not None:
            category = await self._owned_category(user_id, data.category_id)
            txn.apply_state(Categorized(category.id))
        else:
            await self.auto_categorize(user_id, txn)

        return await self.transaction_repo.create(txn)

    async def update_transaction(
        self, user_id: UUID, transaction_id: UUID, data: TransactionUpdate
    ) -> Transaction:
        txn = await self.get_transaction(user_id, transaction_id)
        changes = data.model_dump(exclude_unset=True)

        category_id = changes.pop("category_id", None)
        if category_id is not None:
            category = await self._owned_category(user_id, category_id)
            txn.apply_state(Categorized(category.id))

        for key, value in changes.items():
            setattr(txn, key, value)

        return await self.transaction_repo.save(txn)

    async def categorize(
        self, user_id: UUID, transaction_id: UUID, category_id: UUID
    ) -> Transaction:
        """Assign a category chosen by the user, replacing any earlier one."""
        txn = await self.get_transaction(user_id, transaction_id)
        category = await self._owned_category(user_id, category_id)
        txn.apply_state(Categorized(category.id))
        return await self.transaction_repo.save(txn)

    async def delete_transaction(self, user_id: UUID, transaction_id: UUID) -> None:
        txn = await self.get_transaction(user_id, transaction_id)
        await self.transaction_repo.delete(txn)

    async def list_transactions(
        self,
        user_id: UUID,
        page: int = 1,
        limit: int = 20,
        direction: Direction | None = None,
        category_id: UUID | None = None,
        pending: bool | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> tuple[list[Transaction], int]:
        if start is not None and end is not None and start > end:
            raise ValidationError("TXN_003", details={"start": start.isoformat(), "end": end.isoformat()})
        return await self.transaction_repo.list_by_user(
            user_id,
            skip=(page - 1) * limit,
            limit=limit,
            direction=direction,
            category_id=category_id,
            pending=pending,
            start=start,
            end=end,
        )

    async def get_pending(self, user_id: UUID) -> list[Transaction]:
        return await self.transaction_repo.get_pending(user_id)

    async def get_by_date_range(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[Transaction]:
        if start > end:
            raise ValidationError("TXN_003", details={"start": start.isoformat(), "end": end.isoformat()})
        return await self.transaction_repo.get_by_date_range(user_id, start, end)

    async def dashboard_stats(self, user_id: UUID, now: datetime | None = None) -> DashboardStats:
        """Today's business/personal totals plus pending and total counts."""
        now = now or datetime.now(timezone.utc)
        start = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo or timezone.utc)
        end = start + timedelta(days=1)

        return DashboardStats(
            today_business=await self.transaction_repo.get_total_by_kind(
                user_id, CategoryKind.BUSINESS, start, end
            ),
            today_personal=await self.transaction_repo.get_total_by_kind(
                user_id, CategoryKind.PERSONAL, start, end
            ),
            pending_count=await self.transaction_repo.count_by_user(user_id, pending=True),
            total_transactions=await self.transaction_repo.count_by_user(user_id),
            money=money_meta(),
        )
