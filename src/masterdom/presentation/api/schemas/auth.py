"""Authentication schemas for request/response models."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength (8-128 characters) is checked by the password
    service so that failures carry the WEAK_PASSWORD code.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (8-128 characters)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=50)
    bio: Optional[str] = None
    years_of_experience: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "anna@example.com",
                "password": "securepassword123",
                "first_name": "Anna",
                "years_of_experience": 7,
            },
        },
    )


class RegisterResponse(BaseModel):
    message: str
    user_id: UUID


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "anna@example.com",
                "password": "securepassword123",
            },
        },
    )


class TokenResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user_id: UUID
    is_admin: bool
