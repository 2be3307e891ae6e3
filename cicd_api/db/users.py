"""Read-only user store backed by a fixed in-memory record set."""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str


DEFAULT_USERS = (
    User(id="123", name="John Doe", email="john@example.com"),
)


class UserStore:
    """
    Lookup of users by id.

    Records are fixed at construction and never change afterwards, so a
    single store can serve concurrent requests without locking.
    """

    def __init__(self, users: Iterable[User] = DEFAULT_USERS):
        self._users: Mapping[str, User] = MappingProxyType({user.id: user for user in users})

    def find(self, user_id: str) -> Optional[User]:
        """
        Find a user by exact id.

        Args:
            user_id: Path segment as received, compared verbatim

        Returns:
            The user, or None when no record has that id
        """
        user = self._users.get(user_id)
        if user is None:
            logger.warning(f"User not found: {user_id!r}")
        return user

    def __len__(self) -> int:
        return len(self._users)
