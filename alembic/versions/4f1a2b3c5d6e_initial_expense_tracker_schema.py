"""initial_expense_tracker_schema

Revision ID: 4f1a2b3c5d6e
Revises:
Create Date: 2026-10-17 09:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1a2b3c5d6e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


category_kind = sa.Enum('business', 'personal', name='category_kind')
transaction_direction = sa.Enum('sent', 'received', name='transaction_direction')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('business_phone_number', sa.String(length=20), nullable=True),
        sa.Column('personal_phone_number', sa.String(length=20), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('kind', category_kind, nullable=False),
        sa.Column('color', sa.String(length=20), nullable=False),
        sa.Column('icon', sa.String(length=50), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        # A second seeding race for the same user fails here.
        sa.UniqueConstraint('user_id', 'name', 'is_default', name='uq_category_user_name_default'),
    )
    op.create_index('ix_categories_user_id', 'categories', ['user_id'])

    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=True),
        sa.Column('transaction_code', sa.String(length=20), nullable=True),
        sa.Column('direction', transaction_direction, nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('counterparty_name', sa.String(length=255), nullable=False),
        sa.Column('counterparty_phone', sa.String(length=20), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('mpesa_balance', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('transaction_cost', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('source_phone_number', sa.String(length=20), nullable=True),
        sa.Column('is_pending', sa.Boolean(), nullable=False),
        sa.Column('occurred_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            'is_pending OR category_id IS NOT NULL',
            name='ck_transactions_categorized_has_category',
        ),
        sa.CheckConstraint('amount >= 0', name='ck_transactions_amount_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('transaction_code'),
    )
    op.create_index('ix_transactions_user_id', 'transactions', ['user_id'])
    op.create_index('ix_transactions_category_id', 'transactions', ['category_id'])
    op.create_index('ix_transactions_is_pending', 'transactions', ['is_pending'])
    op.create_index('ix_transactions_user_id_occurred_at', 'transactions', ['user_id', 'occurred_at'])

    op.create_table(
        'suppliers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=20), nullable=True),
        sa.Column('default_category_id', sa.Uuid(), nullable=True),
        sa.Column('transaction_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_transaction_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['default_category_id'], ['categories.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_suppliers_user_id', 'suppliers', ['user_id'])

    op.create_table(
        'sms_settings',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('is_enabled', sa.Boolean(), nullable=False),
        sa.Column('auto_detect_transactions', sa.Boolean(), nullable=False),
        sa.Column('smart_supplier_recognition', sa.Boolean(), nullable=False),
        sa.Column('auto_categorize_recurring', sa.Boolean(), nullable=False),
        sa.Column('custom_keywords', sa.Text(), nullable=True),
        sa.Column('monitor_all_sim_cards', sa.Boolean(), nullable=False),
        sa.Column('last_sync_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )


def downgrade() -> None:
    op.drop_table('sms_settings')
    op.drop_index('ix_suppliers_user_id', table_name='suppliers')
    op.drop_table('suppliers')
    op.drop_index('ix_transactions_user_id_occurred_at', table_name='transactions')
    op.drop_index('ix_transactions_is_pending', table_name='transactions')
    op.drop_index('ix_transactions_category_id', table_name='transactions')
    op.drop_index('ix_transactions_user_id', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('ix_categories_user_id', table_name='categories')
    op.drop_table('categories')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    transaction_direction.drop(op.get_bind(), checkfirst=True)
    category_kind.drop(op.get_bind(), checkfirst=True)
