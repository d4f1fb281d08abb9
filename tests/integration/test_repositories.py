"""Integration tests for repository layer."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.core.types import CategoryKind, Direction
from yasinga.models.category import Category
from yasinga.models.transaction import Categorized, Pending, Transaction
from yasinga.models.user import User
from yasinga.repositories.category import CategoryRepository
from yasinga.repositories.transaction import TransactionRepository
from yasinga.repositories.user import UserRepository

WHEN = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def stock(db_session: AsyncSession, test_user: User) -> Category:
    return await CategoryRepository(db_session).create(
        Category(user_id=test_user.id, name="Food & Beverage Stock", kind=CategoryKind.BUSINESS)
    )


@pytest.fixture
async def lunch(db_session: AsyncSession, test_user: User) -> Category:
    return await CategoryRepository(db_session).create(
        Category(user_id=test_user.id, name="Personal Food & Dining", kind=CategoryKind.PERSONAL)
    )


def make_txn(user: User, amount: str, when: datetime = WHEN, category: Category | None = None,
             direction: Direction = Direction.SENT) -> Transaction:
    txn = Transaction(
        user_id=user.id,
        direction=direction,
        amount=Decimal(amount),
        counterparty_name="Someone",
        occurred_at=when,
    )
    txn.apply_state(Categorized(category.id) if category else Pending())
    return txn


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_get_by_email(self, db_session: AsyncSession, test_user: User):
        repo = UserRepository(db_session)
        assert (await repo.get_by_email("owner@example.com")).id == test_user.id
        assert await repo.get_by_email("missing@example.com") is None
        assert await repo.email_exists("owner@example.com") is True

    @pytest.mark.asyncio
    async def test_active_users(self, db_session: AsyncSession, test_user: User, other_user: User):
        repo = UserRepository(db_session)
        other_user.is_active = False
        await repo.save(other_user)
        active = await repo.get_active_users()
        assert [u.id for u in active] == [test_user.id]


class TestCategoryRepository:
    @pytest.mark.asyncio
    async def test_ordered_by_name_and_kind_filter(
        self, db_session: AsyncSession, test_user: User, stock: Category, lunch: Category
    ):
        repo = CategoryRepository(db_session)
        all_categories = await repo.get_all_by_user(test_user.id)
        assert [c.name for c in all_categories] == ["Food & Beverage Stock", "Personal Food & Dining"]

        personal = await repo.get_all_by_user(test_user.id, kind=CategoryKind.PERSONAL)
        assert [c.id for c in personal] == [lunch.id]
        assert await repo.count_by_user(test_user.id) == 2

    @pytest.mark.asyncio
    async def test_duplicate_default_set_rejected(self, db_session: AsyncSession, test_user: User):
        repo = CategoryRepository(db_session)
        await repo.create(
            Category(user_id=test_user.id, name="Business Income", kind=CategoryKind.BUSINESS, is_default=True)
        )
        with pytest.raises(IntegrityError):
            await repo.create(
                Category(user_id=test_user.id, name="Business Income", kind=CategoryKind.BUSINESS, is_default=True)
            )
        await db_session.rollback()


class TestTransactionRepository:
    @pytest.mark.asyncio
    async def test_categorized_without_category_rejected(
        self, db_session: AsyncSession, test_user: User
    ):
        txn = make_txn(test_user, "10")
        txn.is_pending = False
        db_session.add(txn)
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    @pytest.mark.asyncio
    async def test_category_is_joined(
        self, db_session: AsyncSession, test_user: User, stock: Category
    ):
        repo = TransactionRepository(db_session)
        created = await repo.create(make_txn(test_user, "250", category=stock))
        loaded = await repo.get_by_user(test_user.id, created.id)
        assert loaded.category.name == "Food & Beverage Stock"
        assert loaded.state == Categorized(stock.id)

    @pytest.mark.asyncio
    async def test_list_by_user_filters(
        self, db_session: AsyncSession, test_user: User, other_user: User, stock: Category
    ):
        repo = TransactionRepository(db_session)
        await repo.create(make_txn(test_user, "100", category=stock))
        await repo.create(make_txn(test_user, "200"))
        await repo.create(make_txn(other_user, "300"))

        rows, total = await repo.list_by_user(test_user.id)
        assert total == 2
        assert len(rows) == 2

        pending, total = await repo.list_by_user(test_user.id, pending=True)
        assert total == 1
        assert pending[0].amount == Decimal("200")

        by_category, total = await repo.list_by_user(test_user.id, category_id=stock.id)
        assert total == 1

    @pytest.mark.asyncio
    async def test_reset_category(
        self, db_session: AsyncSession, test_user: User, stock: Category
    ):
        repo = TransactionRepository(db_session)
        txn = await repo.create(make_txn(test_user, "100", category=stock))

        assert await repo.reset_category(test_user.id, stock.id) == 1
        await db_session.commit()

        assert txn.state == Pending()
        assert await repo.count_by_user(test_user.id, pending=True) == 1

    @pytest.mark.asyncio
    async def test_total_by_kind(
        self, db_session: AsyncSession, test_user: User, stock: Category, lunch: Category
    ):
        repo = TransactionRepository(db_session)
        await repo.create(make_txn(test_user, "100.50", category=stock))
        await repo.create(make_txn(test_user, "200.25", category=stock))
        await repo.create(make_txn(test_user, "40", category=lunch))
        await repo.create(make_txn(test_user, "999"))
        await repo.create(make_txn(test_user, "500", when=WHEN - timedelta(days=3), category=stock))

        start = WHEN.replace(hour=0)
        end = start + timedelta(days=1)
        assert await repo.get_total_by_kind(test_user.id, CategoryKind.BUSINESS, start, end) == Decimal("300.75")
        assert await repo.get_total_by_kind(test_user.id, CategoryKind.PERSONAL, start, end) == Decimal("40.00")
