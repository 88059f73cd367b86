"""
User repository: lookups by email and id, and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.utils.exceptions import DuplicateEmailError
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.
    Email is the lookup key; its uniqueness is enforced by the store.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get a single user given their email.

        Args:
            email: Email address to match exactly

        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("email", email)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a single user given their id, or None."""
        return await self.get_by_id(user_id)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Add a new user.

        The row is inserted and read back with a single INSERT ... RETURNING,
        so the returned user is always the one this call created.

        Args:
            user_data: Dictionary with name, email and password

        Returns:
            Created user instance

        Raises:
            DuplicateEmailError: If the email is already registered
            Exception: If any other database operation fails
        """
        values = {
            "name": user_data["name"],
            "email": user_data["email"],
            "password": user_data["password"],
        }

        try:
            created_user = await self.insert_returning(values)
        except IntegrityError as e:
            if self._is_duplicate_email(e):
                logger.warning(f"User with email {values['email']} already exists")
                raise DuplicateEmailError(values["email"]) from e
            raise

        logger.info(f"New user registered: {created_user.email} (ID: {created_user.id})")
        return created_user

    @staticmethod
    def _is_duplicate_email(error: IntegrityError) -> bool:
        """True only for a unique violation on users.email, not e.g. a NOT NULL one."""
        message = str(error.orig).lower()
        is_unique_violation = "unique constraint failed" in message or "duplicate key" in message
        return is_unique_violation and "email" in message
