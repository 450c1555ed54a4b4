# app/services/product_ingredient_service.py
from typing import List
import logging

from app.entities.product import ProductIngredientEntity
from app.repositories.product_ingredient_repository import ProductIngredientRepository
from app.schemas.product import ProductIngredientSchema

logger = logging.getLogger(__name__)


def _to_link(data: ProductIngredientSchema) -> ProductIngredientEntity:
    return ProductIngredientEntity(product_id=data.product_id, ingredient_id=data.ingredient_id)


class ProductIngredientService:
    """Service for product-ingredient links."""

    @staticmethod
    async def add_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        link = await ProductIngredientRepository.add_product_ingredient(_to_link(data))
        logger.info(f"Ingredient {link.ingredient_id} linked to product {link.product_id}")
        return link

    @staticmethod
    async def get_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        return await ProductIngredientRepository.get_product_ingredient(_to_link(data))

    @staticmethod
    async def get_all_product_ingredients() -> List[ProductIngredientEntity]:
        return await ProductIngredientRepository.get_all_product_ingredients()

    @staticmethod
    async def update_product_ingredient(
            original: ProductIngredientSchema,
            updated: ProductIngredientSchema
    ) -> ProductIngredientEntity:
        link = await ProductIngredientRepository.update_product_ingredient(
            _to_link(original),
            _to_link(updated)
        )
        logger.info(
            f"Link ({original.product_id}, {original.ingredient_id}) moved to "
            f"({link.product_id}, {link.ingredient_id})"
        )
        return link

    @staticmethod
    async def delete_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        link = await ProductIngredientRepository.delete_product_ingredient(_to_link(data))
        logger.info(f"Ingredient {link.ingredient_id} unlinked from product {link.product_id}")
        return link
