"""
Pydantic schemas for User API.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Request body for registering a user."""

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=256)


class LoginRequest(BaseModel):
    """Request body for logging in."""

    email: str
    password: str


class MessageResponse(BaseModel):
    """Confirmation message returned by write operations."""

    message: str
