"""
User service.

Handles account creation, credential updates and membership upgrades.
"""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy_core.auth.password import hash_password
from chirpy_core.schemas import UserCreate, UserResponse, UserUpdate
from chirpy_database.models import User


class UserService:
    """User management service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize user service.

        Args:
            session: Database session.
        """
        self.session = session

    async def _get(self, user_id: uuid.UUID | str) -> User | None:
        result = await self.session.execute(select(User).where(User.id == str(user_id)))
        return result.scalar_one_or_none()

    async def _email_taken(self, email: str, exclude_user_id: str | None = None) -> bool:
        stmt = select(User.id).where(User.email == email)
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create_user(self, user_create: UserCreate) -> User:
        """
        Create a new user.

        Args:
            user_create: User creation data.

        Returns:
            Created user instance.

        Raises:
            ValueError: If the email is already registered.
        """
        if await self._email_taken(user_create.email):
            raise ValueError("Email already registered")

        user = User(
            email=user_create.email,
            hashed_password=hash_password(user_create.password),
            is_chirpy_red=False,
        )

        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def get_user(self, user_id: uuid.UUID | str) -> UserResponse:
        """
        Get user by ID.

        Args:
            user_id: User identifier.

        Returns:
            User response.

        Raises:
            ValueError: If user not found.
        """
        user = await self._get(user_id)
        if not user:
            raise ValueError("User not found")

        return UserResponse.model_validate(user)

    async def update_credentials(self, user_id: uuid.UUID | str, update: UserUpdate) -> UserResponse:
        """
        Replace the email and password of a user.

        Args:
            user_id: User identifier.
            update: New email and password.

        Returns:
            Updated user response.

        Raises:
            ValueError: If user not found or the email belongs to someone else.
        """
        user = await self._get(user_id)
        if not user:
            raise ValueError("User not found")

        if await self._email_taken(update.email, exclude_user_id=user.id):
            raise ValueError("Email already registered")

        user.email = update.email
        user.hashed_password = hash_password(update.password)

        await self.session.commit()
        await self.session.refresh(user)

        return UserResponse.model_validate(user)

    async def upgrade_to_chirpy_red(self, user_id: uuid.UUID | str) -> bool:
        """
        Grant Chirpy Red membership.

        Args:
            user_id: User identifier.

        Returns:
            False if the user does not exist.
        """
        user = await self._get(user_id)
        if not user:
            return False

        user.is_chirpy_red = True
        await self.session.commit()
        return True

    async def delete_all_users(self) -> int:
        """
        Delete every user; chirps and refresh tokens go with them. The caller commits.

        Returns:
            Number of deleted users.
        """
        result = await self.session.execute(delete(User))
        return result.rowcount
