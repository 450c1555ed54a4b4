# app/use_cases/category_use_case.py
from typing import List

from app.entities.category import CategoryEntity
from app.services.category_service import CategoryService
from app.schemas.category import CategoryCreateSchema, CategoryUpdateSchema


class CategoryUseCase:

    @staticmethod
    async def create_category(data: CategoryCreateSchema) -> CategoryEntity:
        return await CategoryService.create_category(data)

    @staticmethod
    async def get_category_by_id(category_id: int) -> CategoryEntity:
        return await CategoryService.get_category_by_id(category_id)

    @staticmethod
    async def get_all_categories() -> List[CategoryEntity]:
        return await CategoryService.get_all_categories()

    @staticmethod
    async def update_category(category_id: int, data: CategoryUpdateSchema) -> CategoryEntity:
        return await CategoryService.update_category(category_id, data)

    @staticmethod
    async def delete_category(category_id: int) -> CategoryEntity:
        return await CategoryService.delete_category(category_id)
