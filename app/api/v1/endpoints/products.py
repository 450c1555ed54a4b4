# app/api/v1/endpoints/products.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.product import (
    ProductCreateSchema,
    ProductUpdateSchema,
    ProductResponseSchema,
    ProductDetailResponseSchema
)
from app.use_cases.product_use_case import ProductUseCase
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductAlreadyExistsError
)
from app.exceptions.category_exceptions import CategoryNotFoundError

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "",
    response_model=ProductResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_product(data: ProductCreateSchema) -> ProductResponseSchema:
    """
    Create a new product.

    Args:
        data: Product creation data

    Returns:
        Created product data

    Raises:
        HTTPException: 404 if category not found, 409 if slug already used
    """
    try:
        product = await ProductUseCase.create_product(data)
        return ProductResponseSchema.from_entity(product)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ProductAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.get("", response_model=List[ProductDetailResponseSchema])
async def get_products() -> List[ProductDetailResponseSchema]:
    """Retrieve all products with their images and ingredients."""
    products = await ProductUseCase.get_all_products()
    return [ProductDetailResponseSchema.from_aggregate(p) for p in products]


@router.get("/{product_id}", response_model=ProductDetailResponseSchema)
async def get_product(product_id: int) -> ProductDetailResponseSchema:
    """
    Retrieve a single product with its images and ingredients.

    Raises:
        HTTPException: 404 if product not found
    """
    try:
        product = await ProductUseCase.get_product_by_id(product_id)
        return ProductDetailResponseSchema.from_aggregate(product)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.put("/{product_id}", response_model=ProductResponseSchema)
async def update_product(
        product_id: int,
        data: ProductUpdateSchema
) -> ProductResponseSchema:
    """
    Update an existing product.

    Raises:
        HTTPException: 404 if product or category not found, 409 if slug already used
    """
    try:
        product = await ProductUseCase.update_product(product_id, data)
        return ProductResponseSchema.from_entity(product)
    except (ProductNotFoundError, CategoryNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ProductAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.delete("/{product_id}", response_model=ProductResponseSchema)
async def delete_product(product_id: int) -> ProductResponseSchema:
    """
    Delete a product along with its images and ingredient links.

    Raises:
        HTTPException: 404 if product not found
    """
    try:
        product = await ProductUseCase.delete_product(product_id)
        return ProductResponseSchema.from_entity(product)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
