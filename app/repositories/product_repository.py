# app/repositories/product_repository.py
from collections import defaultdict
from typing import Dict, List, Optional

from tortoise.exceptions import IntegrityError

from app.models.category import Category
from app.models.product import Product, ProductImage, ProductIngredient
from app.entities.product import ProductEntity, ProductAggregate
from app.entities.ingredient import IngredientEntity
from app.repositories.ingredient_repository import IngredientRepository
from app.repositories.product_image_repository import ProductImageRepository
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductAlreadyExistsError
)
from app.exceptions.category_exceptions import CategoryNotFoundError


class ProductRepository:
    """Row mapping for the products table and the product aggregate."""

    @staticmethod
    def _to_entity(product: Product) -> ProductEntity:
        return ProductEntity(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            category_id=product.category_id,
            is_available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at
        )

    @staticmethod
    async def _get_model(product_id: int) -> Product:
        product = await Product.get_or_none(id=product_id)
        if not product:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    async def _check_category(category_id: Optional[int]) -> None:
        if category_id is not None and not await Category.exists(id=category_id):
            raise CategoryNotFoundError(category_id)

    @staticmethod
    async def create_product(data: dict) -> ProductEntity:
        """
        Insert a new product row.

        Args:
            data: Column values, category given as category_id

        Returns:
            Created product

        Raises:
            CategoryNotFoundError: If category_id points nowhere
            ProductAlreadyExistsError: If the slug is already used
        """
        await ProductRepository._check_category(data.get("category_id"))

        try:
            product = await Product.create(**data)
        except IntegrityError:
            raise ProductAlreadyExistsError(data["slug"])
        return ProductRepository._to_entity(product)

    @staticmethod
    async def update_product(product_id: int, data: dict) -> ProductEntity:
        """
        Merge the given fields into an existing product.

        Raises:
            ProductNotFoundError: If product doesn't exist
            CategoryNotFoundError: If the new category_id points nowhere
            ProductAlreadyExistsError: If the new slug is already used
        """
        product = await ProductRepository._get_model(product_id)
        await ProductRepository._check_category(data.get("category_id"))

        try:
            await product.update_from_dict(data).save()
        except IntegrityError:
            raise ProductAlreadyExistsError(data.get("slug", product.slug))
        await product.refresh_from_db()

        return ProductRepository._to_entity(product)

    @staticmethod
    async def delete_product(product_id: int) -> ProductEntity:
        """
        Delete a product. Its images and ingredient links are removed by cascade.

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        product = await ProductRepository._get_model(product_id)
        deleted = ProductRepository._to_entity(product)
        await product.delete()
        return deleted

    @staticmethod
    async def get_aggregate_by_id(product_id: int) -> ProductAggregate:
        """
        Load a product together with its images and linked ingredients.

        Args:
            product_id: Product id

        Returns:
            ProductAggregate with empty collections when nothing is attached

        Raises:
            ProductNotFoundError: If product doesn't exist
        """
        product = await ProductRepository._get_model(product_id)

        images = await ProductImage.filter(product_id=product_id).order_by("sort_order", "id")
        links = await ProductIngredient.filter(
            product_id=product_id
        ).order_by("id").prefetch_related("ingredient")

        return ProductAggregate(
            product=ProductRepository._to_entity(product),
            images=[ProductImageRepository._to_entity(image) for image in images],
            ingredients=[IngredientRepository._to_entity(link.ingredient) for link in links]
        )

    @staticmethod
    async def get_all_aggregates() -> List[ProductAggregate]:
        """
        Load every product with its images and ingredients.

        Images and links are fetched once and grouped by product id in memory.
        """
        products = await Product.all()
        images = await ProductImage.all().order_by("sort_order", "id")
        links = await ProductIngredient.all().order_by("id").prefetch_related("ingredient")

        images_by_product: Dict[int, list] = defaultdict(list)
        for image in images:
            images_by_product[image.product_id].append(ProductImageRepository._to_entity(image))

        ingredients_by_product: Dict[int, List[IngredientEntity]] = defaultdict(list)
        for link in links:
            ingredients_by_product[link.product_id].append(
                IngredientRepository._to_entity(link.ingredient)
            )

        return [
            ProductAggregate(
                product=ProductRepository._to_entity(product),
                images=images_by_product.get(product.id, []),
                ingredients=ingredients_by_product.get(product.id, [])
            )
            for product in products
        ]
