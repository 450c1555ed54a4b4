# app/api/v1/endpoints/ingredients.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.ingredient import (
    IngredientCreateSchema,
    IngredientUpdateSchema,
    IngredientResponseSchema
)
from app.use_cases.ingredient_use_case import IngredientUseCase
from app.exceptions.ingredient_exceptions import (
    IngredientNotFoundError,
    IngredientAlreadyExistsError
)

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.post("/create", response_model=IngredientResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_ingredient(data: IngredientCreateSchema) -> IngredientResponseSchema:
    """Create a new ingredient."""
    try:
        ingredient = await IngredientUseCase.create_ingredient(data)
        return IngredientResponseSchema.from_entity(ingredient)
    except IngredientAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/all", response_model=List[IngredientResponseSchema])
async def get_all_ingredients() -> List[IngredientResponseSchema]:
    """Get all ingredients."""
    ingredients = await IngredientUseCase.get_all_ingredients()
    return [IngredientResponseSchema.from_entity(i) for i in ingredients]


@router.get("/get/{ingredient_id}", response_model=IngredientResponseSchema)
async def get_ingredient(ingredient_id: int) -> IngredientResponseSchema:
    """Get an ingredient by ID."""
    try:
        ingredient = await IngredientUseCase.get_ingredient_by_id(ingredient_id)
        return IngredientResponseSchema.from_entity(ingredient)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/delete/{ingredient_id}", response_model=IngredientResponseSchema)
async def delete_ingredient(ingredient_id: int) -> IngredientResponseSchema:
    """Delete an ingredient."""
    try:
        ingredient = await IngredientUseCase.delete_ingredient(ingredient_id)
        return IngredientResponseSchema.from_entity(ingredient)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/update/{ingredient_id}", response_model=IngredientResponseSchema)
async def update_ingredient(
        ingredient_id: int,
        data: IngredientUpdateSchema
) -> IngredientResponseSchema:
    """Update an ingredient."""
    try:
        ingredient = await IngredientUseCase.update_ingredient(ingredient_id, data)
        return IngredientResponseSchema.from_entity(ingredient)
    except IngredientNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except IngredientAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
