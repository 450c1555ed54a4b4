# app/api/v1/endpoints/product_images.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.product import (
    ProductImageCreateSchema,
    ProductImageUpdateSchema,
    ProductImageResponseSchema
)
from app.use_cases.product_use_case import ProductUseCase
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductImageNotFoundError
)

router = APIRouter(prefix="/products/images", tags=["product images"])


@router.post("", response_model=ProductImageResponseSchema, status_code=status.HTTP_201_CREATED)
async def add_product_image(data: ProductImageCreateSchema) -> ProductImageResponseSchema:
    """Attach an image to a product."""
    try:
        image = await ProductUseCase.add_product_image(data)
        return ProductImageResponseSchema.from_entity(image)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=List[ProductImageResponseSchema])
async def get_product_images() -> List[ProductImageResponseSchema]:
    """List every product image."""
    images = await ProductUseCase.get_all_product_images()
    return [ProductImageResponseSchema.from_entity(i) for i in images]


@router.get("/product/{product_id}", response_model=List[ProductImageResponseSchema])
async def get_images_for_product(product_id: int) -> List[ProductImageResponseSchema]:
    """List the images of one product in display order."""
    try:
        images = await ProductUseCase.get_images_for_product(product_id)
        return [ProductImageResponseSchema.from_entity(i) for i in images]
    except ProductNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{image_id}", response_model=ProductImageResponseSchema)
async def get_product_image(image_id: int) -> ProductImageResponseSchema:
    try:
        image = await ProductUseCase.get_product_image_by_id(image_id)
        return ProductImageResponseSchema.from_entity(image)
    except ProductImageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{image_id}", response_model=ProductImageResponseSchema)
async def update_product_image(
        image_id: int,
        data: ProductImageUpdateSchema
) -> ProductImageResponseSchema:
    try:
        image = await ProductUseCase.update_product_image(image_id, data)
        return ProductImageResponseSchema.from_entity(image)
    except ProductImageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{image_id}", response_model=ProductImageResponseSchema)
async def delete_product_image(image_id: int) -> ProductImageResponseSchema:
    try:
        image = await ProductUseCase.delete_product_image(image_id)
        return ProductImageResponseSchema.from_entity(image)
    except ProductImageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
