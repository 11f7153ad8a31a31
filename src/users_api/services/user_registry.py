"""In-memory user registry."""

import logging
import threading
from collections.abc import Iterable

from users_api.models.user import User
from users_api.services.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserRegistry:
    """Ordered, in-memory collection of users.

    Users are kept in insertion order. Ids come from a counter owned by the
    registry that only moves forward, so an id is never handed out twice even
    after the user holding it is deleted.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize the registry.

        Args:
            users: Optional initial users, stored in the given order

        Raises:
            ValueError: If two initial users share an id
        """
        self._lock = threading.Lock()
        self._users: list[User] = []
        for user in users or ():
            if any(existing.id == user.id for existing in self._users):
                raise ValueError(f"Duplicate user id: {user.id}")
            self._users.append(user.model_copy())
        self._next_id = max((user.id for user in self._users), default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: int) -> int:
        # Caller must hold the lock.
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        logger.debug("User %s not found", user_id)
        raise UserNotFoundError(user_id)

    def list_users(self) -> list[User]:
        """List all users in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: int) -> User:
        """Get a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        with self._lock:
            return self._users[self._index_of(user_id)].model_copy()

    def create_user(self, name: str | None) -> User:
        """Append a new user with the next free id.

        Args:
            name: Name of the user, may be None

        Returns:
            The created user
        """
        with self._lock:
            user = User(id=self._next_id, name=name)
            self._next_id += 1
            self._users.append(user)
        logger.info("Created user %s", user.id)
        return user.model_copy()

    def update_user(self, user_id: int, name: str | None) -> User:
        """Replace the name of an existing user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        with self._lock:
            user = self._users[self._index_of(user_id)]
            user.name = name
            updated = user.model_copy()
        logger.info("Updated user %s", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        """Remove a user, keeping the order of the remaining ones.

        Raises:
            UserNotFoundError: If no user has this id
        """
        with self._lock:
            del self._users[self._index_of(user_id)]
        logger.info("Deleted user %s", user_id)
