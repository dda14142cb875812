"""Pydantic models for API request/response."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request body for POST /api/v1/users.

    Fields are optional here so that missing name/email reach the use case
    and come back as a validation failure in the standard envelope.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = Field(None, description="Defaults to 'user'")


class Envelope(BaseModel):
    """Response envelope shared by every endpoint."""
    success: bool
    message: str
    data: Optional[Any] = None
