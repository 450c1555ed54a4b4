# app/use_cases/product_use_case.py
from typing import List

from app.entities.product import (
    ProductEntity,
    ProductAggregate,
    ProductImageEntity,
    ProductIngredientEntity
)
from app.services.product_service import ProductService
from app.services.product_image_service import ProductImageService
from app.services.product_ingredient_service import ProductIngredientService
from app.schemas.product import (
    ProductCreateSchema,
    ProductUpdateSchema,
    ProductImageCreateSchema,
    ProductImageUpdateSchema,
    ProductIngredientSchema
)


class ProductUseCase:
    """Entry point for the product aggregate: products, their images and ingredient links."""

    @staticmethod
    async def create_product(data: ProductCreateSchema) -> ProductEntity:
        return await ProductService.create_product(data)

    @staticmethod
    async def get_product_by_id(product_id: int) -> ProductAggregate:
        return await ProductService.get_product_by_id(product_id)

    @staticmethod
    async def update_product(product_id: int, data: ProductUpdateSchema) -> ProductEntity:
        return await ProductService.update_product(product_id, data)

    @staticmethod
    async def delete_product(product_id: int) -> ProductEntity:
        return await ProductService.delete_product(product_id)

    @staticmethod
    async def get_all_products() -> List[ProductAggregate]:
        return await ProductService.get_all_products()

    # images

    @staticmethod
    async def add_product_image(data: ProductImageCreateSchema) -> ProductImageEntity:
        return await ProductImageService.add_product_image(data)

    @staticmethod
    async def get_product_image_by_id(image_id: int) -> ProductImageEntity:
        return await ProductImageService.get_product_image_by_id(image_id)

    @staticmethod
    async def get_all_product_images() -> List[ProductImageEntity]:
        return await ProductImageService.get_all_product_images()

    @staticmethod
    async def get_images_for_product(product_id: int) -> List[ProductImageEntity]:
        return await ProductImageService.get_images_for_product(product_id)

    @staticmethod
    async def update_product_image(image_id: int, data: ProductImageUpdateSchema) -> ProductImageEntity:
        return await ProductImageService.update_product_image(image_id, data)

    @staticmethod
    async def delete_product_image(image_id: int) -> ProductImageEntity:
        return await ProductImageService.delete_product_image(image_id)

    # ingredient links

    @staticmethod
    async def add_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        return await ProductIngredientService.add_product_ingredient(data)

    @staticmethod
    async def get_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        return await ProductIngredientService.get_product_ingredient(data)

    @staticmethod
    async def get_all_product_ingredients() -> List[ProductIngredientEntity]:
        return await ProductIngredientService.get_all_product_ingredients()

    @staticmethod
    async def update_product_ingredient(
            original: ProductIngredientSchema,
            updated: ProductIngredientSchema
    ) -> ProductIngredientEntity:
        return await ProductIngredientService.update_product_ingredient(original, updated)

    @staticmethod
    async def delete_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientEntity:
        return await ProductIngredientService.delete_product_ingredient(data)
