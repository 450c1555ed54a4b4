# app/schemas/category.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.entities.category import CategoryEntity


class CategoryCreateSchema(BaseModel):
    """Schema for creating a new category."""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)


class CategoryUpdateSchema(BaseModel):
    """Schema for updating a category."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)


class CategoryResponseSchema(BaseModel):
    """Schema for category responses."""

    id: int
    name: str
    description: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, category: CategoryEntity) -> "CategoryResponseSchema":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at
        )
