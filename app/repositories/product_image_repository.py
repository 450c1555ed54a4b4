# app/repositories/product_image_repository.py
from typing import List

from app.models.product import Product, ProductImage
from app.entities.product import ProductImageEntity
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductImageNotFoundError
)


class ProductImageRepository:
    """Row mapping for the product_images table."""

    @staticmethod
    def _to_entity(image: ProductImage) -> ProductImageEntity:
        return ProductImageEntity(
            id=image.id,
            product_id=image.product_id,
            image_url=image.image_url,
            alt_text=image.alt_text,
            sort_order=image.sort_order
        )

    @staticmethod
    async def _get_model(image_id: int) -> ProductImage:
        image = await ProductImage.get_or_none(id=image_id)
        if not image:
            raise ProductImageNotFoundError(image_id)
        return image

    @staticmethod
    async def add_product_image(data: dict) -> ProductImageEntity:
        """
        Attach a new image to a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        if not await Product.exists(id=data["product_id"]):
            raise ProductNotFoundError(data["product_id"])

        image = await ProductImage.create(**data)
        return ProductImageRepository._to_entity(image)

    @staticmethod
    async def get_product_image_by_id(image_id: int) -> ProductImageEntity:
        image = await ProductImageRepository._get_model(image_id)
        return ProductImageRepository._to_entity(image)

    @staticmethod
    async def get_all_product_images() -> List[ProductImageEntity]:
        images = await ProductImage.all()
        return [ProductImageRepository._to_entity(i) for i in images]

    @staticmethod
    async def get_images_for_product(product_id: int) -> List[ProductImageEntity]:
        """
        List the images of one product in display order.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        if not await Product.exists(id=product_id):
            raise ProductNotFoundError(product_id)

        images = await ProductImage.filter(product_id=product_id).order_by("sort_order", "id")
        return [ProductImageRepository._to_entity(i) for i in images]

    @staticmethod
    async def update_product_image(image_id: int, data: dict) -> ProductImageEntity:
        image = await ProductImageRepository._get_model(image_id)
        await image.update_from_dict(data).save()
        await image.refresh_from_db()
        return ProductImageRepository._to_entity(image)

    @staticmethod
    async def delete_product_image(image_id: int) -> ProductImageEntity:
        image = await ProductImageRepository._get_model(image_id)
        deleted = ProductImageRepository._to_entity(image)
        await image.delete()
        return deleted
