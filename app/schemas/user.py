# app/schemas/user.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from app.entities.user import UserEntity


class LoginSchema(BaseModel):
    """Schema for admin login."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str


class UserCreateSchema(BaseModel):
    """Schema for creating an admin user."""

    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6, max_length=72)
    email: EmailStr

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        """bcrypt only accepts up to 72 bytes."""
        if len(value.encode("utf-8")) > 72:
            raise ValueError('Password is too long')
        return value


class UserUpdateSchema(BaseModel):
    """Schema for updating an admin user."""

    username: Optional[str] = Field(None, min_length=3, max_length=100)
    password: Optional[str] = Field(None, min_length=6, max_length=72)
    email: Optional[EmailStr] = None

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: Optional[str]) -> Optional[str]:
        """Validate password length if provided."""
        if value is not None and len(value.encode("utf-8")) > 72:
            raise ValueError('Password is too long')
        return value


class UserResponseSchema(BaseModel):
    """Schema for user responses. Never carries the password hash."""

    id: int
    username: str
    email: str
    created_at: datetime
    last_login: Optional[datetime]

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponseSchema":
        """
        Create schema from user entity.

        Args:
            user: UserEntity instance

        Returns:
            UserResponseSchema instance
        """
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            last_login=user.last_login
        )
