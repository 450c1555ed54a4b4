# app/services/product_service.py
from typing import List
import logging

from app.entities.product import ProductEntity, ProductAggregate
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreateSchema, ProductUpdateSchema

logger = logging.getLogger(__name__)


class ProductService:
    """Service for managing products and reading product aggregates."""

    @staticmethod
    async def create_product(data: ProductCreateSchema) -> ProductEntity:
        """
        Create a new product. Products are available unless told otherwise.

        Args:
            data: Product creation data

        Returns:
            Created product

        Raises:
            CategoryNotFoundError: If category doesn't exist
            ProductAlreadyExistsError: If the slug is already used
        """
        fields = data.model_dump()
        if fields['is_available'] is None:
            fields['is_available'] = True

        product = await ProductRepository.create_product(fields)
        logger.info(f"Product created: {product.id} - {product.slug}")
        return product

    @staticmethod
    async def get_product_by_id(product_id: int) -> ProductAggregate:
        """
        Retrieve a product with its images and ingredients.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        return await ProductRepository.get_aggregate_by_id(product_id)

    @staticmethod
    async def get_all_products() -> List[ProductAggregate]:
        return await ProductRepository.get_all_aggregates()

    @staticmethod
    async def update_product(product_id: int, data: ProductUpdateSchema) -> ProductEntity:
        """
        Update an existing product.

        An update that leaves out is_available marks the product available
        again.

        Args:
            product_id: Product id
            data: Fields to change

        Returns:
            Updated product

        Raises:
            ProductNotFoundError: If product doesn't exist
            CategoryNotFoundError: If the new category doesn't exist
            ProductAlreadyExistsError: If the new slug is already used
        """
        update_fields = {}

        if data.name is not None:
            update_fields['name'] = data.name

        if data.slug is not None:
            update_fields['slug'] = data.slug

        if data.price is not None:
            update_fields['price'] = data.price

        for nullable in ('description', 'category_id'):
            if nullable in data.model_fields_set:
                update_fields[nullable] = getattr(data, nullable)

        update_fields['is_available'] = True if data.is_available is None else data.is_available

        product = await ProductRepository.update_product(product_id, update_fields)
        logger.info(f"Product updated: {product.id}")
        return product

    @staticmethod
    async def delete_product(product_id: int) -> ProductEntity:
        product = await ProductRepository.delete_product(product_id)
        logger.info(f"Product deleted: {product_id}")
        return product
