"""Service construction and dependency injection."""

import logging

from fastapi import Request

from users_api.config import Settings
from users_api.models.user import User
from users_api.services.exceptions import UserNotFoundError
from users_api.services.user_registry import UserRegistry

logger = logging.getLogger(__name__)

DEFAULT_USERS = (
    User(id=1, name="Miguel"),
    User(id=2, name="Ana"),
    User(id=3, name="Carlos"),
)


def build_user_registry(settings: Settings) -> UserRegistry:
    """Create the registry for a new application.

    Args:
        settings: Application settings

    Returns:
        UserRegistry, seeded with the default users when enabled
    """
    users = DEFAULT_USERS if settings.seed_users else ()
    registry = UserRegistry(users)
    logger.info("Initialized UserRegistry with %d users", len(registry))
    return registry


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was built with."""
    return request.app.state.settings


def get_user_registry(request: Request) -> UserRegistry:
    """Get the registry attached to the running application."""
    return request.app.state.user_registry


__all__ = [
    "DEFAULT_USERS",
    "UserNotFoundError",
    "UserRegistry",
    "build_user_registry",
    "get_app_settings",
    "get_user_registry",
]
