"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from yasinga.api.deps import get_current_user, get_transaction_service
from yasinga.models.user import User
from yasinga.schemas.report import DashboardStats
from yasinga.services.transaction import TransactionService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard statistics",
    description="Today's business and personal totals, pending count and total count.",
)
async def get_stats(
    current_user: User = Depends(get_current_user),
    service: TransactionService = Depends(get_transaction_service),
) -> DashboardStats:
    return await service.dashboard_stats(current_user.id)
