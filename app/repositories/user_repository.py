# app/repositories/user_repository.py
from typing import List, Optional

from tortoise.exceptions import IntegrityError

from app.models.user import AdminUser
from app.entities.user import UserEntity
from app.exceptions.user_exceptions import UserNotFoundError, UserAlreadyExistsError


class UserRepository:
    """Row mapping for the admin_users table."""

    @staticmethod
    def _to_entity(user: AdminUser) -> UserEntity:
        return UserEntity(
            id=user.id,
            username=user.username,
            password_hash=user.password_hash,
            email=user.email,
            created_at=user.created_at,
            last_login=user.last_login
        )

    @staticmethod
    async def find_by_username(username: str) -> Optional[UserEntity]:
        """
        Look up a user by username.

        Args:
            username: Login name

        Returns:
            UserEntity or None if no such user
        """
        user = await AdminUser.get_or_none(username=username)
        return UserRepository._to_entity(user) if user else None

    @staticmethod
    async def find_by_id(user_id: int) -> Optional[UserEntity]:
        user = await AdminUser.get_or_none(id=user_id)
        return UserRepository._to_entity(user) if user else None

    @staticmethod
    async def find_all() -> List[UserEntity]:
        users = await AdminUser.all()
        return [UserRepository._to_entity(user) for user in users]

    @staticmethod
    async def create(username: str, password_hash: str, email: str) -> UserEntity:
        """
        Insert a new admin user.

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        try:
            user = await AdminUser.create(
                username=username,
                password_hash=password_hash,
                email=email
            )
        except IntegrityError:
            raise UserAlreadyExistsError(username)
        return UserRepository._to_entity(user)

    @staticmethod
    async def update(user_id: int, update_fields: dict) -> UserEntity:
        """
        Merge the given fields into an existing user row.

        Args:
            user_id: User id
            update_fields: Column values to overwrite

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user doesn't exist
            UserAlreadyExistsError: If the new username is taken
        """
        user = await AdminUser.get_or_none(id=user_id)
        if not user:
            raise UserNotFoundError(user_id)

        try:
            await user.update_from_dict(update_fields).save()
        except IntegrityError:
            raise UserAlreadyExistsError(update_fields.get("username", user.username))
        await user.refresh_from_db()

        return UserRepository._to_entity(user)

    @staticmethod
    async def delete(user_id: int) -> Optional[UserEntity]:
        """Delete a user row and return what was removed, or None if absent."""
        user = await AdminUser.get_or_none(id=user_id)
        if not user:
            return None

        deleted = UserRepository._to_entity(user)
        await user.delete()
        return deleted
