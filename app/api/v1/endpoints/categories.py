# app/api/v1/endpoints/categories.py
from fastapi import APIRouter, HTTPException, status
from typing import List

from app.schemas.category import (
    CategoryCreateSchema,
    CategoryUpdateSchema,
    CategoryResponseSchema
)
from app.use_cases.category_use_case import CategoryUseCase
from app.exceptions.category_exceptions import (
    CategoryNotFoundError,
    CategoryAlreadyExistsError
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("/create", response_model=CategoryResponseSchema, status_code=status.HTTP_201_CREATED)
async def create_category(data: CategoryCreateSchema) -> CategoryResponseSchema:
    """
    Create a new category.

    Raises:
        HTTPException: 409 if the name is already used
    """
    try:
        category = await CategoryUseCase.create_category(data)
        return CategoryResponseSchema.from_entity(category)
    except CategoryAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.get("/get/{category_id}", response_model=CategoryResponseSchema)
async def get_category(category_id: int) -> CategoryResponseSchema:
    """
    Get category by ID.

    Raises:
        HTTPException: 404 if category not found
    """
    try:
        category = await CategoryUseCase.get_category_by_id(category_id)
        return CategoryResponseSchema.from_entity(category)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/all", response_model=List[CategoryResponseSchema])
async def get_all_categories() -> List[CategoryResponseSchema]:
    """Get all categories."""
    categories = await CategoryUseCase.get_all_categories()
    return [CategoryResponseSchema.from_entity(c) for c in categories]


@router.post("/update/{category_id}", response_model=CategoryResponseSchema)
async def update_category(
        category_id: int,
        data: CategoryUpdateSchema
) -> CategoryResponseSchema:
    """
    Update a category.

    Raises:
        HTTPException: 404 if category not found, 409 if the name is already used
    """
    try:
        category = await CategoryUseCase.update_category(category_id, data)
        return CategoryResponseSchema.from_entity(category)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except CategoryAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )


@router.post("/delete/{category_id}", response_model=CategoryResponseSchema)
async def delete_category(category_id: int) -> CategoryResponseSchema:
    """
    Delete a category.

    Raises:
        HTTPException: 404 if category not found
    """
    try:
        category = await CategoryUseCase.delete_category(category_id)
        return CategoryResponseSchema.from_entity(category)
    except CategoryNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
