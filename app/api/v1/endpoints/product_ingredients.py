# app/api/v1/endpoints/product_ingredients.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.product import ProductIngredientSchema
from app.use_cases.product_use_case import ProductUseCase
from app.exceptions.product_exceptions import (
    ProductNotFoundError,
    ProductIngredientNotFoundError,
    ProductIngredientAlreadyExistsError
)
from app.exceptions.ingredient_exceptions import IngredientNotFoundError

router = APIRouter(prefix="/products/ingredients", tags=["product ingredients"])


@router.post("", response_model=ProductIngredientSchema, status_code=status.HTTP_201_CREATED)
async def add_product_ingredient(data: ProductIngredientSchema) -> ProductIngredientSchema:
    """
    Link an ingredient to a product.

    Raises:
        HTTPException: 404 if product or ingredient not found, 409 if already linked
    """
    try:
        link = await ProductUseCase.add_product_ingredient(data)
        return ProductIngredientSchema.from_entity(link)
    except (ProductNotFoundError, IngredientNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ProductIngredientAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=List[ProductIngredientSchema])
async def get_product_ingredients() -> List[ProductIngredientSchema]:
    """List every product-ingredient link."""
    links = await ProductUseCase.get_all_product_ingredients()
    return [ProductIngredientSchema.from_entity(link) for link in links]


@router.get("/{product_id}/{ingredient_id}", response_model=ProductIngredientSchema)
async def get_product_ingredient(product_id: int, ingredient_id: int) -> ProductIngredientSchema:
    try:
        link = await ProductUseCase.get_product_ingredient(
            ProductIngredientSchema(product_id=product_id, ingredient_id=ingredient_id)
        )
        return ProductIngredientSchema.from_entity(link)
    except ProductIngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{product_id}/{ingredient_id}", response_model=ProductIngredientSchema)
async def update_product_ingredient(
        product_id: int,
        ingredient_id: int,
        data: ProductIngredientSchema
) -> ProductIngredientSchema:
    """
    Replace the link identified by the path with the pair given in the body.

    Raises:
        HTTPException: 404 if the link, product or ingredient is missing, 409 if the new pair exists
    """
    try:
        link = await ProductUseCase.update_product_ingredient(
            ProductIngredientSchema(product_id=product_id, ingredient_id=ingredient_id),
            data
        )
        return ProductIngredientSchema.from_entity(link)
    except (ProductIngredientNotFoundError, ProductNotFoundError, IngredientNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ProductIngredientAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{product_id}/{ingredient_id}", response_model=ProductIngredientSchema)
async def delete_product_ingredient(product_id: int, ingredient_id: int) -> ProductIngredientSchema:
    """Remove one product-ingredient pair; other links of the product stay."""
    try:
        link = await ProductUseCase.delete_product_ingredient(
            ProductIngredientSchema(product_id=product_id, ingredient_id=ingredient_id)
        )
        return ProductIngredientSchema.from_entity(link)
    except ProductIngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
