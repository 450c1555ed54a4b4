# app/use_cases/ingredient_use_case.py
from typing import List

from app.entities.ingredient import IngredientEntity
from app.services.ingredient_service import IngredientService
from app.schemas.ingredient import IngredientCreateSchema, IngredientUpdateSchema


class IngredientUseCase:

    @staticmethod
    async def create_ingredient(data: IngredientCreateSchema) -> IngredientEntity:
        return await IngredientService.create_ingredient(data)

    @staticmethod
    async def get_all_ingredients() -> List[IngredientEntity]:
        return await IngredientService.get_all_ingredients()

    @staticmethod
    async def get_ingredient_by_id(ingredient_id: int) -> IngredientEntity:
        return await IngredientService.get_ingredient_by_id(ingredient_id)

    @staticmethod
    async def update_ingredient(ingredient_id: int, data: IngredientUpdateSchema) -> IngredientEntity:
        return await IngredientService.update_ingredient(ingredient_id, data)

    @staticmethod
    async def delete_ingredient(ingredient_id: int) -> IngredientEntity:
        return await IngredientService.delete_ingredient(ingredient_id)
