"""Public category listing."""

from fastapi import APIRouter

from masterdom.application.queries.categories import ListCategoriesQuery
from masterdom.presentation.api.dependencies import PublicRepoFactory
from masterdom.presentation.api.schemas.categories import CategoryResponse

router = APIRouter()


@router.get("", summary="List categories")
async def list_categories(factory: PublicRepoFactory) -> list[CategoryResponse]:
    """All service categories ordered by name."""
    categories = await ListCategoriesQuery.from_factory(factory).execute()
    return [CategoryResponse.model_validate(c) for c in categories]
