"""User models for the Users API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Unique identifier for the user")
    name: str | None = Field(None, description="Name of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Miguel",
            }
        }


class UserPayload(BaseModel):
    """Request body for creating or updating a user."""

    name: str | None = Field(None, description="Name of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {"example": {"name": "Lucia"}}


class MessageResponse(BaseModel):
    """Confirmation message."""

    message: str = Field(..., description="Human readable confirmation")


class ErrorResponse(BaseModel):
    """Error payload returned for unknown users."""

    error: str = Field(..., description="Error message")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {"example": {"error": "Usuario no encontrado"}}
