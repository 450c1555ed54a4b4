# app/schemas/product.py
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from typing import Optional, List
from datetime import datetime

from app.entities.product import (
    ProductEntity,
    ProductImageEntity,
    ProductIngredientEntity,
    ProductAggregate
)
from app.schemas.ingredient import IngredientResponseSchema

MAX_PRICE = Decimal('999999.99')


def _check_price(value: Decimal) -> Decimal:
    if value < 0:
        raise ValueError('Price must not be negative')
    if value > MAX_PRICE:
        raise ValueError('Price is too large')
    return value


class ProductCreateSchema(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=255, pattern=r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
    description: Optional[str] = None
    price: Decimal = Field(..., decimal_places=2)
    category_id: Optional[int] = None
    is_available: Optional[bool] = None

    @field_validator('price')
    @classmethod
    def validate_price(cls, value: Decimal) -> Decimal:
        """Validate price."""
        return _check_price(value)


class ProductUpdateSchema(BaseModel):
    """Schema for updating a product."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, decimal_places=2)
    category_id: Optional[int] = None
    is_available: Optional[bool] = None

    @field_validator('price')
    @classmethod
    def validate_price(cls, value: Optional[Decimal]) -> Optional[Decimal]:
        """Validate price if provided."""
        if value is None:
            return value
        return _check_price(value)


class ProductResponseSchema(BaseModel):
    """Schema for product responses."""

    id: int
    name: str
    slug: str
    description: Optional[str]
    price: str
    category_id: Optional[int]
    is_available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: ProductEntity) -> "ProductResponseSchema":
        """
        Create response schema from product entity.

        Args:
            product: ProductEntity instance

        Returns:
            ProductResponseSchema instance
        """
        return cls(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=f"{product.price:.2f}",
            category_id=product.category_id,
            is_available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at
        )


class ProductImageCreateSchema(BaseModel):
    """Schema for attaching an image to a product."""

    product_id: int
    image_url: str = Field(..., min_length=1, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=255)
    sort_order: int = Field(0, ge=0, le=32767)


class ProductImageUpdateSchema(BaseModel):
    """Schema for updating a product image."""

    image_url: Optional[str] = Field(None, min_length=1, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=255)
    sort_order: Optional[int] = Field(None, ge=0, le=32767)


class ProductImageResponseSchema(BaseModel):
    """Schema for product image responses."""

    id: int
    product_id: int
    image_url: str
    alt_text: Optional[str]
    sort_order: int

    @classmethod
    def from_entity(cls, image: ProductImageEntity) -> "ProductImageResponseSchema":
        return cls(
            id=image.id,
            product_id=image.product_id,
            image_url=image.image_url,
            alt_text=image.alt_text,
            sort_order=image.sort_order
        )


class ProductIngredientSchema(BaseModel):
    """Schema identifying a product-ingredient link by its composite key."""

    product_id: int
    ingredient_id: int

    @classmethod
    def from_entity(cls, link: ProductIngredientEntity) -> "ProductIngredientSchema":
        return cls(product_id=link.product_id, ingredient_id=link.ingredient_id)


class ProductDetailResponseSchema(ProductResponseSchema):
    """Schema for a product returned together with its images and ingredients."""

    images: List[ProductImageResponseSchema]
    ingredients: List[IngredientResponseSchema]

    @classmethod
    def from_aggregate(cls, aggregate: ProductAggregate) -> "ProductDetailResponseSchema":
        """
        Create response schema from a product aggregate.

        Args:
            aggregate: Product with its images and linked ingredients

        Returns:
            ProductDetailResponseSchema instance
        """
        base = ProductResponseSchema.from_entity(aggregate.product)
        return cls(
            **base.model_dump(),
            images=[ProductImageResponseSchema.from_entity(i) for i in aggregate.images],
            ingredients=[IngredientResponseSchema.from_entity(i) for i in aggregate.ingredients]
        )
