# app/schemas/ingredient.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.entities.ingredient import IngredientEntity


class IngredientCreateSchema(BaseModel):
    """Schema for creating a new ingredient."""

    name: str = Field(..., min_length=1, max_length=50)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Strip surrounding whitespace."""
        value = value.strip()
        if not value:
            raise ValueError('Name must not be blank')
        return value


class IngredientUpdateSchema(BaseModel):
    """Schema for updating an ingredient."""

    name: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: Optional[str]) -> Optional[str]:
        """Strip surrounding whitespace if provided."""
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError('Name must not be blank')
        return value


class IngredientResponseSchema(BaseModel):
    """Schema for ingredient responses."""

    id: int
    name: str

    @classmethod
    def from_entity(cls, ingredient: IngredientEntity) -> "IngredientResponseSchema":
        return cls(id=ingredient.id, name=ingredient.name)
