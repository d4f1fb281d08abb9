"""Category management endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from yasinga.api.deps import get_category_service, get_current_user
from yasinga.models.user import User
from yasinga.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from yasinga.services.category import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="""
    List the user's business and personal categories, ordered by name.

    The first call for a user with no categories seeds the default set
    (nine business and six personal categories).
    """,
)
async def list_categories(
    current_user: User = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    categories = await service.ensure_defaults(current_user.id)
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await service.create_category(current_user.id, data)
    return CategoryResponse.model_validate(category)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Update category",
)
async def update_category(
    category_id: UUID,
    data: CategoryUpdate,
    current_user: User = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Update a category's name, kind, color or icon.

    Raises:
        404: Category not found (CAT_001)
    """
    category = await service.update_category(current_user.id, category_id, data)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    description="Delete a category. Its transactions go back to pending.",
)
async def delete_category(
    category_id: UUID,
    current_user: User = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    await service.delete_category(current_user.id, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
