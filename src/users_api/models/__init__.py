"""Pydantic models for the Users API."""

from users_api.models.health import HealthCheckResponse
from users_api.models.user import ErrorResponse, MessageResponse, User, UserPayload

__all__ = ["ErrorResponse", "HealthCheckResponse", "MessageResponse", "User", "UserPayload"]
