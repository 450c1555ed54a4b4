# app/use_cases/user_use_case.py
from typing import List

from app.entities.user import UserEntity
from app.services.user_service import UserService
from app.schemas.user import LoginSchema, UserCreateSchema, UserUpdateSchema
from app.exceptions.user_exceptions import InvalidCredentialsError


class UserUseCase:
    """Entry point for admin account operations."""

    @staticmethod
    async def login(data: LoginSchema) -> UserEntity:
        """
        Log an admin user in.

        Raises:
            InvalidCredentialsError: If the username is unknown or the password is wrong
        """
        user = await UserService.login(data)
        if not user:
            raise InvalidCredentialsError()
        return user

    @staticmethod
    async def create_user(data: UserCreateSchema) -> UserEntity:
        return await UserService.create_user(data)

    @staticmethod
    async def update_user(user_id: int, data: UserUpdateSchema) -> UserEntity:
        return await UserService.update_user(user_id, data)

    @staticmethod
    async def delete_user(user_id: int) -> UserEntity:
        return await UserService.delete_user(user_id)

    @staticmethod
    async def get_user_by_id(user_id: int) -> UserEntity:
        return await UserService.get_user_by_id(user_id)

    @staticmethod
    async def get_all_users() -> List[UserEntity]:
        return await UserService.get_all_users()
