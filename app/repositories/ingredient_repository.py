# app/repositories/ingredient_repository.py
from typing import List

from tortoise.exceptions import IntegrityError

from app.models.ingredient import Ingredient
from app.entities.ingredient import IngredientEntity
from app.exceptions.ingredient_exceptions import (
    IngredientNotFoundError,
    IngredientAlreadyExistsError
)


class IngredientRepository:
    """Row mapping for the ingredients table."""

    @staticmethod
    def _to_entity(ingredient: Ingredient) -> IngredientEntity:
        return IngredientEntity(id=ingredient.id, name=ingredient.name)

    @staticmethod
    async def _get_model(ingredient_id: int) -> Ingredient:
        ingredient = await Ingredient.get_or_none(id=ingredient_id)
        if not ingredient:
            raise IngredientNotFoundError(ingredient_id)
        return ingredient

    @staticmethod
    async def find_all() -> List[IngredientEntity]:
        ingredients = await Ingredient.all()
        return [IngredientRepository._to_entity(i) for i in ingredients]

    @staticmethod
    async def find_by_id(ingredient_id: int) -> IngredientEntity:
        ingredient = await IngredientRepository._get_model(ingredient_id)
        return IngredientRepository._to_entity(ingredient)

    @staticmethod
    async def create(data: dict) -> IngredientEntity:
        try:
            ingredient = await Ingredient.create(**data)
        except IntegrityError:
            raise IngredientAlreadyExistsError(data["name"])
        return IngredientRepository._to_entity(ingredient)

    @staticmethod
    async def update(ingredient_id: int, data: dict) -> IngredientEntity:
        ingredient = await IngredientRepository._get_model(ingredient_id)

        try:
            await ingredient.update_from_dict(data).save()
        except IntegrityError:
            raise IngredientAlreadyExistsError(data.get("name", ingredient.name))
        await ingredient.refresh_from_db()

        return IngredientRepository._to_entity(ingredient)

    @staticmethod
    async def delete(ingredient_id: int) -> IngredientEntity:
        """Delete an ingredient; its product links go with it."""
        ingredient = await IngredientRepository._get_model(ingredient_id)
        deleted = IngredientRepository._to_entity(ingredient)
        await ingredient.delete()
        return deleted
