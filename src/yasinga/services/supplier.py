"""Supplier service."""
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.core.exceptions import NotFoundError
from yasinga.models.supplier import Supplier
from yasinga.repositories.category import CategoryRepository
from yasinga.repositories.supplier import SupplierRepository
from yasinga.schemas.supplier import SupplierCreate, SupplierUpdate


class SupplierService:
    """Service layer for supplier operations."""

    def __init__(self, db: AsyncSession):
        self.supplier_repo = SupplierRepository(db)
        self.category_repo = CategoryRepository(db)

    async def _check_category(self, user_id: UUID, category_id: UUID | None) -> None:
        if category_id is None:
            return
        if await self.category_repo.get_by_user(user_id, category_id) is None:
            raise NotFoundError("CAT_001", details={"category_id": str(category_id)})

    async def list_suppliers(self, user_id: UUID, search: str | None = None) -> list[Supplier]:
        return await self.supplier_repo.get_all_by_user(user_id, search=search)

    async def create_supplier(self, user_id: UUID, data: SupplierCreate) -> Supplier:
        await self._check_category(user_id, data.default_category_id)
        return await self.supplier_repo.create(Supplier(user_id=user_id, **data.model_dump()))

    async def update_supplier(
        self, user_id: UUID, supplier_id: UUID, data: SupplierUpdate
    ) -> Supplier:
        supplier = await self.supplier_repo.get_by_user(user_id, supplier_id)
        if supplier is None:
            raise NotFoundError("SUP_001", details={"supplier_id": str(supplier_id)})

        changes = data.model_dump(exclude_unset=True)
        if "default_category_id" in changes:
            await self._check_category(user_id, changes["default_category_id"])

        for key, value in changes.items():
            setattr(supplier, key, value)
        return await self.supplier_repo.save(supplier)
