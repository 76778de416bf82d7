"""Common schemas shared across API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")
    details: Optional[dict[str, Any]] = Field(None, description="Extra context")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "Offer not found", "code": "OFFER_NOT_FOUND"},
        },
    )


class CreatedResponse(BaseModel):
    """Id of a newly created resource."""

    id: int


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
