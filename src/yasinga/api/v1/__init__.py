"""API version 1 routes."""

from fastapi import APIRouter

from yasinga.api.v1 import (
    auth,
    categories,
    dashboard,
    reports,
    sms_settings,
    suppliers,
    transactions,
)

router = APIRouter(prefix="/api/v1")

router.include_router(auth.router)
router.include_router(categories.router)
router.include_router(transactions.router)
router.include_router(suppliers.router)
router.include_router(sms_settings.router)
router.include_router(reports.router)
router.include_router(dashboard.router)
