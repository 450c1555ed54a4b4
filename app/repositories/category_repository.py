# app/repositories/category_repository.py
from typing import List

from tortoise.exceptions import IntegrityError

from app.models.category import Category
from app.entities.category import CategoryEntity
from app.exceptions.category_exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError
)


class CategoryRepository:
    """Row mapping for the categories table."""

    @staticmethod
    def _to_entity(category: Category) -> CategoryEntity:
        return CategoryEntity(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at
        )

    @staticmethod
    async def _get_model(category_id: int) -> Category:
        category = await Category.get_or_none(id=category_id)
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    @staticmethod
    async def create(data: dict) -> CategoryEntity:
        """
        Insert a new category.

        Args:
            data: Column values

        Returns:
            Created category

        Raises:
            CategoryAlreadyExistsError: If the name is already used
        """
        try:
            category = await Category.create(**data)
        except IntegrityError:
            raise CategoryAlreadyExistsError(data["name"])
        return CategoryRepository._to_entity(category)

    @staticmethod
    async def get_by_id(category_id: int) -> CategoryEntity:
        """
        Retrieve a single category by ID.

        Raises:
            CategoryNotFoundError: If category doesn't exist
        """
        category = await CategoryRepository._get_model(category_id)
        return CategoryRepository._to_entity(category)

    @staticmethod
    async def get_all() -> List[CategoryEntity]:
        categories = await Category.all()
        return [CategoryRepository._to_entity(c) for c in categories]

    @staticmethod
    async def update(category_id: int, data: dict) -> CategoryEntity:
        """
        Merge the given fields into an existing category.

        Raises:
            CategoryNotFoundError: If category doesn't exist
            CategoryAlreadyExistsError: If the new name is already used
        """
        category = await CategoryRepository._get_model(category_id)

        try:
            await category.update_from_dict(data).save()
        except IntegrityError:
            raise CategoryAlreadyExistsError(data.get("name", category.name))
        await category.refresh_from_db()

        return CategoryRepository._to_entity(category)

    @staticmethod
    async def delete(category_id: int) -> CategoryEntity:
        """
        Delete a category. Products of the category keep existing without one.

        Raises:
            CategoryNotFoundError: If category doesn't exist
        """
        category = await CategoryRepository._get_model(category_id)
        deleted = CategoryRepository._to_entity(category)
        await category.delete()
        return deleted
