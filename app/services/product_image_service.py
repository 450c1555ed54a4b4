# app/services/product_image_service.py
from typing import List
import logging

from app.entities.product import ProductImageEntity
from app.repositories.product_image_repository import ProductImageRepository
from app.schemas.product import ProductImageCreateSchema, ProductImageUpdateSchema

logger = logging.getLogger(__name__)


class ProductImageService:
    """Service for product images."""

    @staticmethod
    async def add_product_image(data: ProductImageCreateSchema) -> ProductImageEntity:
        image = await ProductImageRepository.add_product_image(data.model_dump())
        logger.info(f"Image {image.id} added to product {image.product_id}")
        return image

    @staticmethod
    async def get_product_image_by_id(image_id: int) -> ProductImageEntity:
        return await ProductImageRepository.get_product_image_by_id(image_id)

    @staticmethod
    async def get_all_product_images() -> List[ProductImageEntity]:
        return await ProductImageRepository.get_all_product_images()

    @staticmethod
    async def get_images_for_product(product_id: int) -> List[ProductImageEntity]:
        return await ProductImageRepository.get_images_for_product(product_id)

    @staticmethod
    async def update_product_image(image_id: int, data: ProductImageUpdateSchema) -> ProductImageEntity:
        update_fields = {}

        if data.image_url is not None:
            update_fields['image_url'] = data.image_url

        if 'alt_text' in data.model_fields_set:
            update_fields['alt_text'] = data.alt_text

        if data.sort_order is not None:
            update_fields['sort_order'] = data.sort_order

        image = await ProductImageRepository.update_product_image(image_id, update_fields)
        logger.info(f"Image updated: {image.id}")
        return image

    @staticmethod
    async def delete_product_image(image_id: int) -> ProductImageEntity:
        image = await ProductImageRepository.delete_product_image(image_id)
        logger.info(f"Image deleted: {image_id}")
        return image
