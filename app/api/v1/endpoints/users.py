# app/api/v1/endpoints/users.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.user import (
    LoginSchema,
    UserCreateSchema,
    UserUpdateSchema,
    UserResponseSchema
)
from app.use_cases.user_use_case import UserUseCase
from app.exceptions.user_exceptions import (
    InvalidCredentialsError,
    UserNotFoundError,
    UserAlreadyExistsError
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/login", response_model=UserResponseSchema, operation_id="login")
async def login(data: LoginSchema) -> UserResponseSchema:
    """Log an admin user in with username and password."""
    try:
        user = await UserUseCase.login(data)
        return UserResponseSchema.from_entity(user)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )


@router.post(
    "/create",
    response_model=UserResponseSchema,
    status_code=status.HTTP_201_CREATED,
    operation_id="createUser"
)
async def create_user(data: UserCreateSchema) -> UserResponseSchema:
    """Create an admin user."""
    try:
        user = await UserUseCase.create_user(data)
        return UserResponseSchema.from_entity(user)
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.post("/update/{user_id}", response_model=UserResponseSchema, operation_id="updateUser")
async def update_user(user_id: int, data: UserUpdateSchema) -> UserResponseSchema:
    """
    Update an admin user.

    Args:
        user_id: User id
        data: Fields to change; a given password is re-hashed

    Returns:
        Updated user

    Raises:
        HTTPException: 404 if user not found, 409 if username taken
    """
    try:
        user = await UserUseCase.update_user(user_id, data)
        return UserResponseSchema.from_entity(user)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.post("/delete/{user_id}", response_model=UserResponseSchema, operation_id="deleteUser")
async def delete_user(user_id: int) -> UserResponseSchema:
    """Delete an admin user and return the removed record."""
    try:
        user = await UserUseCase.delete_user(user_id)
        return UserResponseSchema.from_entity(user)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/get/{user_id}", response_model=UserResponseSchema, operation_id="getUser")
async def get_user(user_id: int) -> UserResponseSchema:
    """Get an admin user by id."""
    try:
        user = await UserUseCase.get_user_by_id(user_id)
        return UserResponseSchema.from_entity(user)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/all", response_model=List[UserResponseSchema], operation_id="getAllUsers")
async def get_all_users() -> List[UserResponseSchema]:
    """List all admin users."""
    users = await UserUseCase.get_all_users()
    return [UserResponseSchema.from_entity(u) for u in users]
