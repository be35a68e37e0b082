"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Email and national id arrive as plain strings; the domain value objects
own their validation.
"""

from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    """Request model for user creation."""

    name: str | None = Field(None, description="User display name")
    email: str = Field(..., description="Email address (normalized by the server)")
    national_id: str | None = Field(
        None, description="11-digit national id, digits or XXX.XXX.XXX-XX"
    )


class UserResponse(BaseModel):
    """Response model for a single user."""

    id: int
    name: str
    email: str
    national_id: str | None = None
    national_id_formatted: str | None = None


class UserListResponse(BaseModel):
    """Response model for user listings."""

    id: int
    name: str
    email: str


class CountResponse(BaseModel):
    """Response model for user count."""

    count: int


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
