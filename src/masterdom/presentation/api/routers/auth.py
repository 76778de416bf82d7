"""Authentication router: registration and login."""

import logging

from fastapi import APIRouter, status

from masterdom.domain.user import Profile
from masterdom.presentation.api.dependencies import AuthService, DBSession
from masterdom.presentation.api.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User and profile created"},
        400: {"description": "Invalid email, weak password or invalid profile"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> RegisterResponse:
    """
    Create a user account together with its profile.

    Both rows are written in one transaction.
    """
    profile = Profile(
        first_name=request.first_name,
        last_name=request.last_name,
        phone_number=request.phone_number,
        bio=request.bio,
        years_of_experience=request.years_of_experience,
    )
    user = await auth_service.register(
        email=request.email,
        password=request.password,
        profile=profile,
    )
    await session.commit()

    return RegisterResponse(message="User registered successfully", user_id=user.id)


@router.post(
    "/login",
    summary="Log in",
    responses={
        200: {"description": "Access token issued"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> TokenResponse:
    """Authenticate with email and password and return a bearer token."""
    user, access_token = await auth_service.login(request.email, request.password)

    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=auth_service.token_lifetime_seconds,
        user_id=user.id,
        is_admin=user.is_admin,
    )
