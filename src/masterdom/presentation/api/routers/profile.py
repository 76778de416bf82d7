"""Self-service profile router."""

import logging

from fastapi import APIRouter

from masterdom.application.commands.user import UpdateProfileCommand
from masterdom.application.dtos.users import UserDetailDTO
from masterdom.application.queries.user import GetUserDetailQuery
from masterdom.domain.user import ProfilePatch
from masterdom.presentation.api.dependencies import RepoFactory
from masterdom.presentation.api.schemas.users import (
    ProfileUpdateRequest,
    UserDetailResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Get own profile")
async def get_profile(factory: RepoFactory) -> UserDetailResponse:
    dto = await GetUserDetailQuery.from_factory(factory).execute()
    return UserDetailResponse.model_validate(dto)


@router.patch(
    "",
    summary="Update own profile",
    responses={
        200: {"description": "Updated profile"},
        400: {"description": "Invalid value, e.g. empty first name"},
    },
)
async def update_profile(
    request: ProfileUpdateRequest,
    factory: RepoFactory,
) -> UserDetailResponse:
    """
    Partially update the caller's profile.

    Keys absent from the body are left untouched; explicit nulls clear.
    """
    patch = ProfilePatch.from_mapping(request.model_dump(exclude_unset=True))
    user = await UpdateProfileCommand.from_factory(factory).execute(patch)
    await factory.session.commit()

    return UserDetailResponse.model_validate(UserDetailDTO.from_user(user))
