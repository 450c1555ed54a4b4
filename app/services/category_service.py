# app/services/category_service.py
from typing import List
import logging

from app.entities.category import CategoryEntity
from app.repositories.category_repository import CategoryRepository
from app.schemas.category import CategoryCreateSchema, CategoryUpdateSchema

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for managing categories."""

    @staticmethod
    async def create_category(data: CategoryCreateSchema) -> CategoryEntity:
        category = await CategoryRepository.create(data.model_dump())
        logger.info(f"Category created: {category.id} - {category.name}")
        return category

    @staticmethod
    async def get_category_by_id(category_id: int) -> CategoryEntity:
        return await CategoryRepository.get_by_id(category_id)

    @staticmethod
    async def get_all_categories() -> List[CategoryEntity]:
        return await CategoryRepository.get_all()

    @staticmethod
    async def update_category(category_id: int, data: CategoryUpdateSchema) -> CategoryEntity:
        update_fields = {}

        if data.name is not None:
            update_fields['name'] = data.name

        # an explicit null clears the description
        if 'description' in data.model_fields_set:
            update_fields['description'] = data.description

        category = await CategoryRepository.update(category_id, update_fields)
        logger.info(f"Category updated: {category.id}")
        return category

    @staticmethod
    async def delete_category(category_id: int) -> CategoryEntity:
        category = await CategoryRepository.delete(category_id)
        logger.info(f"Category deleted: {category_id}")
        return category
