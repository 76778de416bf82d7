"""Admin back-office router: users, offers, categories and statistics."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from masterdom.application.commands.admin import DeleteUserCommand, UpdateUserCommand
from masterdom.application.commands.categories import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from masterdom.application.commands.offers import (
    DeleteOfferCommand,
    SetOfferActiveCommand,
)
from masterdom.application.dtos.categories import CategoryDTO
from masterdom.application.dtos.users import UserDetailDTO
from masterdom.application.queries.admin import (
    AdminStatsQuery,
    ListAdminOffersQuery,
    ListUsersQuery,
)
from masterdom.application.queries.user import GetUserDetailQuery
from masterdom.domain.user import ProfilePatch
from masterdom.presentation.api.config import get_api_settings
from masterdom.presentation.api.dependencies import AdminRepoFactory
from masterdom.presentation.api.schemas.admin import (
    AdminOfferResponse,
    AdminOfferUpdateRequest,
    AdminStatsResponse,
    AdminUserUpdateRequest,
    OfferStateResponse,
)
from masterdom.presentation.api.schemas.categories import (
    CategoryRequest,
    CategoryResponse,
)
from masterdom.presentation.api.schemas.users import UserDetailResponse
from masterdom_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------


@router.get(
    "/users",
    summary="List all users",
    responses={
        200: {"description": "List of all users"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(factory: AdminRepoFactory) -> list[UserDetailResponse]:
    users = await ListUsersQuery.from_factory(factory).execute()
    return [UserDetailResponse.model_validate(u) for u in users]


@router.get(
    "/users/{user_id}",
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: UUID, factory: AdminRepoFactory) -> UserDetailResponse:
    dto = await GetUserDetailQuery.from_factory(factory).execute(user_id)
    return UserDetailResponse.model_validate(dto)


@router.patch(
    "/users/{user_id}",
    summary="Update a user's profile or admin flag",
    responses={
        200: {"description": "User updated"},
        403: {"description": "Demotion not allowed"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: AdminUserUpdateRequest,
    factory: AdminRepoFactory,
    settings: Settings = Depends(get_api_settings),
) -> UserDetailResponse:
    """
    Patch a user's profile and optionally change the admin flag.

    Promotion is always allowed. Nobody can demote themself, and only
    the super-admin can demote another admin.
    """
    data = request.model_dump(exclude_unset=True)
    is_admin = data.pop("is_admin", None)

    command = UpdateUserCommand.from_factory(
        factory,
        super_admin_email=settings.super_admin_email,
    )
    user = await command.execute(
        user_id,
        patch=ProfilePatch.from_mapping(data),
        is_admin=is_admin,
    )
    await factory.session.commit()

    logger.info("Admin %s updated user %s", factory.user_context.email, user_id)
    return UserDetailResponse.model_validate(UserDetailDTO.from_user(user))


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted successfully"},
        403: {"description": "Admin accounts cannot be deleted"},
        404: {"description": "User not found"},
    },
)
async def delete_user(user_id: UUID, factory: AdminRepoFactory) -> None:
    await DeleteUserCommand.from_factory(factory).execute(user_id)
    await factory.session.commit()
    logger.info("Admin %s deleted user: %s", factory.user_context.email, user_id)


# -----------------------------------------------------------------------------
# Offers
# -----------------------------------------------------------------------------


@router.get("/offers", summary="List all offers, including inactive ones")
async def list_offers(factory: AdminRepoFactory) -> list[AdminOfferResponse]:
    offers = await ListAdminOffersQuery.from_factory(factory).execute()
    return [AdminOfferResponse.model_validate(o) for o in offers]


@router.patch(
    "/offers/{offer_id}",
    summary="Activate or deactivate an offer",
    responses={404: {"description": "Offer not found"}},
)
async def update_offer(
    offer_id: int,
    request: AdminOfferUpdateRequest,
    factory: AdminRepoFactory,
) -> OfferStateResponse:
    offer = await SetOfferActiveCommand.from_factory(factory).execute(
        offer_id,
        request.is_active,
    )
    await factory.session.commit()
    return OfferStateResponse(
        id=offer.id,
        is_active=offer.is_active,
        updated_at=offer.updated_at,
    )


@router.delete(
    "/offers/{offer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an offer",
    responses={404: {"description": "Offer not found"}},
)
async def delete_offer(offer_id: int, factory: AdminRepoFactory) -> None:
    await DeleteOfferCommand.from_factory(factory).execute(offer_id)
    await factory.session.commit()


# -----------------------------------------------------------------------------
# Categories
# -----------------------------------------------------------------------------


@router.post(
    "/categories",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    responses={409: {"description": "Name already taken"}},
)
async def create_category(
    request: CategoryRequest,
    factory: AdminRepoFactory,
) -> CategoryResponse:
    category = await CreateCategoryCommand.from_factory(factory).execute(
        request.name,
        request.description,
    )
    await factory.session.commit()
    return CategoryResponse.model_validate(CategoryDTO.from_entity(category))


@router.patch(
    "/categories/{category_id}",
    summary="Rename a category",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "Name already taken"},
    },
)
async def update_category(
    category_id: int,
    request: CategoryRequest,
    factory: AdminRepoFactory,
) -> CategoryResponse:
    category = await UpdateCategoryCommand.from_factory(factory).execute(
        category_id,
        request.name,
        request.description,
    )
    await factory.session.commit()
    return CategoryResponse.model_validate(CategoryDTO.from_entity(category))


@router.delete(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    responses={404: {"description": "Category not found"}},
)
async def delete_category(category_id: int, factory: AdminRepoFactory) -> None:
    await DeleteCategoryCommand.from_factory(factory).execute(category_id)
    await factory.session.commit()


# -----------------------------------------------------------------------------
# Statistics
# -----------------------------------------------------------------------------


@router.get("/stats", summary="Platform statistics")
async def get_stats(factory: AdminRepoFactory) -> AdminStatsResponse:
    stats = await AdminStatsQuery.from_factory(factory).execute()
    return AdminStatsResponse.model_validate(stats)
