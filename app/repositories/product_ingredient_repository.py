# app/repositories/product_ingredient_repository.py
from typing import List

from tortoise.exceptions import IntegrityError

from app.models.ingredient import Ingredient
from app.models.product import Product, ProductIngredient
from app.entities.product import ProductIngredientEntity
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductIngredientNotFoundError,
    ProductIngredientAlreadyExistsError
)
from app.exceptions.ingredient_exceptions import IngredientNotFoundError


class ProductIngredientRepository:
    """Row mapping for the product_ingredients link table."""

    @staticmethod
    def _to_entity(link: ProductIngredient) -> ProductIngredientEntity:
        return ProductIngredientEntity(
            product_id=link.product_id,
            ingredient_id=link.ingredient_id
        )

    @staticmethod
    async def _get_model(product_id: int, ingredient_id: int) -> ProductIngredient:
        link = await ProductIngredient.get_or_none(
            product_id=product_id,
            ingredient_id=ingredient_id
        )
        if not link:
            raise ProductIngredientNotFoundError(product_id, ingredient_id)
        return link

    @staticmethod
    async def _check_targets(product_id: int, ingredient_id: int) -> None:
        if not await Product.exists(id=product_id):
            raise ProductNotFoundError(product_id)
        if not await Ingredient.exists(id=ingredient_id):
            raise IngredientNotFoundError(ingredient_id)

    @staticmethod
    async def add_product_ingredient(link: ProductIngredientEntity) -> ProductIngredientEntity:
        """
        Link an ingredient to a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist
            IngredientNotFoundError: If the ingredient doesn't exist
            ProductIngredientAlreadyExistsError: If the pair is already linked
        """
        await ProductIngredientRepository._check_targets(link.product_id, link.ingredient_id)

        try:
            created = await ProductIngredient.create(
                product_id=link.product_id,
                ingredient_id=link.ingredient_id
            )
        except IntegrityError:
            raise ProductIngredientAlreadyExistsError(link.product_id, link.ingredient_id)
        return ProductIngredientRepository._to_entity(created)

    @staticmethod
    async def get_product_ingredient(link: ProductIngredientEntity) -> ProductIngredientEntity:
        found = await ProductIngredientRepository._get_model(link.product_id, link.ingredient_id)
        return ProductIngredientRepository._to_entity(found)

    @staticmethod
    async def get_all_product_ingredients() -> List[ProductIngredientEntity]:
        links = await ProductIngredient.all()
        return [ProductIngredientRepository._to_entity(link) for link in links]

    @staticmethod
    async def update_product_ingredient(
            original: ProductIngredientEntity,
            updated: ProductIngredientEntity
    ) -> ProductIngredientEntity:
        """
        Re-point an existing link to another (product, ingredient) pair.

        Args:
            original: Key of the link to change
            updated: New key

        Returns:
            The link under its new key
        """
        link = await ProductIngredientRepository._get_model(
            original.product_id,
            original.ingredient_id
        )
        await ProductIngredientRepository._check_targets(updated.product_id, updated.ingredient_id)

        try:
            await link.update_from_dict({
                "product_id": updated.product_id,
                "ingredient_id": updated.ingredient_id
            }).save()
        except IntegrityError:
            raise ProductIngredientAlreadyExistsError(updated.product_id, updated.ingredient_id)

        return ProductIngredientRepository._to_entity(link)

    @staticmethod
    async def delete_product_ingredient(link: ProductIngredientEntity) -> ProductIngredientEntity:
        """Remove exactly one (product, ingredient) pair."""
        found = await ProductIngredientRepository._get_model(link.product_id, link.ingredient_id)
        deleted = ProductIngredientRepository._to_entity(found)
        await found.delete()
        return deleted
