# app/services/ingredient_service.py
from typing import List
import logging

from app.entities.ingredient import IngredientEntity
from app.repositories.ingredient_repository import IngredientRepository
from app.schemas.ingredient import IngredientCreateSchema, IngredientUpdateSchema

logger = logging.getLogger(__name__)


class IngredientService:
    """Service for managing ingredients."""

    @staticmethod
    async def get_all_ingredients() -> List[IngredientEntity]:
        return await IngredientRepository.find_all()

    @staticmethod
    async def get_ingredient_by_id(ingredient_id: int) -> IngredientEntity:
        return await IngredientRepository.find_by_id(ingredient_id)

    @staticmethod
    async def create_ingredient(data: IngredientCreateSchema) -> IngredientEntity:
        ingredient = await IngredientRepository.create(data.model_dump())
        logger.info(f"Ingredient created: {ingredient.id} - {ingredient.name}")
        return ingredient

    @staticmethod
    async def update_ingredient(ingredient_id: int, data: IngredientUpdateSchema) -> IngredientEntity:
        ingredient = await IngredientRepository.update(
            ingredient_id,
            data.model_dump(exclude_unset=True, exclude_none=True)
        )
        logger.info(f"Ingredient updated: {ingredient.id}")
        return ingredient

    @staticmethod
    async def delete_ingredient(ingredient_id: int) -> IngredientEntity:
        ingredient = await IngredientRepository.delete(ingredient_id)
        logger.info(f"Ingredient deleted: {ingredient_id}")
        return ingredient
