# app/services/user_service.py
from typing import List, Optional
import logging

from app.entities.user import UserEntity
from app.repositories.user_repository import UserRepository
from app.schemas.user import LoginSchema, UserCreateSchema, UserUpdateSchema
from app.core.security import hash_password, verify_password, get_current_utc_time
from app.exceptions.user_exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Service for admin accounts. The only place passwords are hashed or checked."""

    @staticmethod
    async def login(data: LoginSchema) -> Optional[UserEntity]:
        """
        Check credentials and stamp the login time.

        Args:
            data: Username and plaintext password

        Returns:
            The user on success, None if the username is unknown or the
            password does not match
        """
        user = await UserRepository.find_by_username(data.username)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning(f"Failed login for username '{data.username}'")
            return None

        user = await UserRepository.update(user.id, {"last_login": get_current_utc_time()})
        logger.info(f"User {user.id} logged in")
        return user

    @staticmethod
    async def create_user(data: UserCreateSchema) -> UserEntity:
        """
        Create an admin user, hashing the password before it is stored.

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        user = await UserRepository.create(
            username=data.username,
            password_hash=hash_password(data.password),
            email=data.email
        )
        logger.info(f"User created: {user.id} - {user.username}")
        return user

    @staticmethod
    async def get_user_by_id(user_id: int) -> UserEntity:
        """
        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = await UserRepository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    async def get_all_users() -> List[UserEntity]:
        return await UserRepository.find_all()

    @staticmethod
    async def update_user(user_id: int, data: UserUpdateSchema) -> UserEntity:
        """
        Update an admin user.

        A supplied password is always hashed again, even when it equals the
        current one, so the stored hash changes on every such update.

        Raises:
            UserNotFoundError: If user doesn't exist
            UserAlreadyExistsError: If the new username is taken
        """
        update_fields = {}

        if data.username is not None:
            update_fields['username'] = data.username

        if data.email is not None:
            update_fields['email'] = data.email

        if data.password is not None:
            update_fields['password_hash'] = hash_password(data.password)

        user = await UserRepository.update(user_id, update_fields)
        logger.info(f"User updated: {user.id}")
        return user

    @staticmethod
    async def delete_user(user_id: int) -> UserEntity:
        """
        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = await UserRepository.delete(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        logger.info(f"User deleted: {user_id}")
        return user
