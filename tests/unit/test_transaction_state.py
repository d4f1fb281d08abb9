"""Unit tests for the Pending/Categorized transaction lifecycle."""

from decimal import Decimal
from datetime import datetime, timezone
from uuid import uuid4

from yasinga.core.types import Direction
from yasinga.models.transaction import Categorized, Pending, Transaction


def make_transaction() -> Transaction:
    return Transaction(
        user_id=uuid4(),
        direction=Direction.SENT,
        amount=Decimal("100.00"),
        counterparty_name="Naivas",
        occurred_at=datetime(2026, 10, 17, tzinfo=timezone.utc),
    )


def test_new_transaction_state_is_pending():
    txn = make_transaction()
    txn.apply_state(Pending())
    assert txn.state == Pending()
    assert txn.is_pending is True
    assert txn.category_id is None


def test_categorized_sets_both_columns():
    txn = make_transaction()
    category_id = uuid4()
    txn.apply_state(Categorized(category_id))
    assert txn.state == Categorized(category_id)
    assert txn.is_pending is False
    assert txn.category_id == category_id


def test_recategorize_replaces_category():
    txn = make_transaction()
    first, second = uuid4(), uuid4()
    txn.apply_state(Categorized(first))
    txn.apply_state(Categorized(second))
    assert txn.state == Categorized(second)


def test_back_to_pending_clears_category():
    txn = make_transaction()
    txn.apply_state(Categorized(uuid4()))
    txn.apply_state(Pending())
    assert txn.state == Pending()
    assert txn.category_id is None
    assert txn.category is None
