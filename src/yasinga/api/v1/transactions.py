"""Transaction recording, categorization and query endpoints."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from yasinga.api.deps import get_current_user, get_transaction_service
from yasinga.core.types import Direction
from yasinga.models.user import User
from yasinga.schemas.common import PaginationMeta
from yasinga.schemas.transaction import (
    CategorizeRequest,
    TransactionCreate,
    TransactionListResult,
    TransactionResponse,
    TransactionUpdate,
)
from yasinga.services.transaction import TransactionService, money_meta

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get(
    "",
    response_model=TransactionListResult,
    summary="List transactions with filters",
    description="""
    List the user's transactions, newest first.

    ## Filters
    - **direction**: `sent` or `received`
    - **category_id**: Only transactions in this category
    - **pending**: `true` for transactions awaiting a category
    - **start**, **end**: Inclusive date-time range
    """,
)
async def list_transactions(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page (1-100)")] = 20,
    direction: Annotated[Direction | None, Query(description="sent or received")] = None,
    category_id: Annotated[UUID | None, Query(description="Filter by category ID")] = None,
    pending: Annotated[bool | None, Query(description="Filter by pending state")] = None,
    start: Annotated[datetime | None, Query(description="From (inclusive)")] = None,
    end: Annotated[datetime | None, Query(description="To (inclusive)")] = None,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionListResult:
    """
    List transactions with filtering and pagination.

    Raises:
        400: start is after end (TXN_003)
    """
    transactions, total = await service.list_transactions(
        current_user.id,
        page=page,
        limit=limit,
        direction=direction,
        category_id=category_id,
        pending=pending,
        start=start,
        end=end,
    )
    return TransactionListResult(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        pagination=PaginationMeta(
            page=page,
            limit=limit,
            total=total,
            total_pages=(total + limit - 1) // limit if total else 0,
        ),
        money=money_meta(),
    )


@router.get(
    "/pending",
    response_model=list[TransactionResponse],
    summary="List pending transactions",
    description="Transactions still awaiting a category, newest first.",
)
async def list_pending(
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    transactions = await service.get_pending(current_user.id)
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.get(
    "/range",
    response_model=list[TransactionResponse],
    summary="Transactions in a date range",
    description="All transactions between start and end (inclusive), oldest first.",
)
async def list_by_range(
    start: Annotated[datetime, Query(description="From (inclusive)")],
    end: Annotated[datetime, Query(description="To (inclusive)")],
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    transactions = await service.get_by_date_range(current_user.id, start, end)
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    description="""
    Record an already-parsed M-Pesa transaction.

    Without `category_id` the transaction is auto-categorized against the
    user's categories (defaults are seeded on first use). A transaction no
    rule can place stays pending.
    """,
)
async def create_transaction(
    data: TransactionCreate,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    """
    Raises:
        400: category_id is not one of the user's categories (TXN_002)
        409: transaction_code already recorded (DB_002)
    """
    txn = await service.create_transaction(current_user.id, data)
    return TransactionResponse.model_validate(txn)


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
)
async def get_transaction(
    transaction_id: UUID,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    txn = await service.get_transaction(current_user.id, transaction_id)
    return TransactionResponse.model_validate(txn)


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Update transaction",
    description="Change a transaction's category, description or counterparty phone.",
)
async def update_transaction(
    transaction_id: UUID,
    data: TransactionUpdate,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    txn = await service.update_transaction(current_user.id, transaction_id, data)
    return TransactionResponse.model_validate(txn)


@router.post(
    "/{transaction_id}/categorize",
    response_model=TransactionResponse,
    summary="Categorize transaction",
    description="Assign one of the user's categories, replacing any earlier one.",
)
async def categorize_transaction(
    transaction_id: UUID,
    data: CategorizeRequest,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    """
    Raises:
        404: Transaction not found (TXN_001)
        400: Category not owned by the user (TXN_002)
    """
    txn = await service.categorize(current_user.id, transaction_id, data.category_id)
    return TransactionResponse.model_validate(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete transaction",
)
async def delete_transaction(
    transaction_id: UUID,
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> Response:
    await service.delete_transaction(current_user.id, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
