# app/entities/product.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from app.entities.ingredient import IngredientEntity


@dataclass
class ProductEntity:
    id: int
    name: str
    slug: str
    description: Optional[str]
    price: Decimal
    category_id: Optional[int]
    is_available: bool
    created_at: datetime
    updated_at: datetime


@dataclass
class ProductImageEntity:
    id: int
    product_id: int
    image_url: str
    alt_text: Optional[str]
    sort_order: int


@dataclass
class ProductIngredientEntity:
    product_id: int
    ingredient_id: int


@dataclass
class ProductAggregate:
    """A product row together with its images and linked ingredients."""

    product: ProductEntity
    images: List[ProductImageEntity] = field(default_factory=list)
    ingredients: List[IngredientEntity] = field(default_factory=list)
