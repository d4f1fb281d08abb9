"""Supplier endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from yasinga.api.deps import get_current_user, get_supplier_service
from yasinga.models.user import User
from yasinga.schemas.supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from yasinga.services.supplier import SupplierService

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get(
    "",
    response_model=list[SupplierResponse],
    summary="List suppliers",
    description="Suppliers ordered by most recent payment, then name.",
)
async def list_suppliers(
    search: Annotated[str | None, Query(max_length=100, description="Name contains (case-insensitive)")] = None,
    current_user: User = Depends(get_current_user),
    service: SupplierService = Depends(get_supplier_service),
) -> list[SupplierResponse]:
    suppliers = await service.list_suppliers(current_user.id, search=search)
    return [SupplierResponse.model_validate(s) for s in suppliers]


@router.post(
    "",
    response_model=SupplierResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create supplier",
)
async def create_supplier(
    data: SupplierCreate,
    current_user: User = Depends(get_current_user),
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    supplier = await service.create_supplier(current_user.id, data)
    return SupplierResponse.model_validate(supplier)


@router.put(
    "/{supplier_id}",
    response_model=SupplierResponse,
    summary="Update supplier",
)
async def update_supplier(
    supplier_id: UUID,
    data: SupplierUpdate,
    current_user: User = Depends(get_current_user),
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierResponse:
    """
    Raises:
        404: Supplier not found (SUP_001) or default category not found (CAT_001)
    """
    supplier = await service.update_supplier(current_user.id, supplier_id, data)
    return SupplierResponse.model_validate(supplier)
