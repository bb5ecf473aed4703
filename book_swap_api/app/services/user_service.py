"""
Business logic for users.

Users are stored in the ``users`` table of the store.  Creating a user
performs no uniqueness check on the email address.
"""

import logging
from typing import List

from ..core.storage import Table
from ..schemas.user import User, UserCreate
from .entity_factory import EntityFactory

logger = logging.getLogger(__name__)


class UserService:
    """Service for registering and listing users."""

    def __init__(self, table: Table[User], factory: EntityFactory) -> None:
        self.table = table
        self.factory = factory

    async def create_user(self, data: UserCreate) -> User:
        """Build a new user from ``data`` and insert it.

        Storage failures propagate to the caller as ``StorageError``.
        """
        user = self.factory.build(User, data)
        self.table.insert(user.id, user)
        logger.info("Registered user %s", user.id)
        return user

    async def list_users(self) -> List[User]:
        return self.table.values()
