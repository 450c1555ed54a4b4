# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1.endpoints import (
    users,
    categories,
    ingredients,
    product_images,
    product_ingredients,
    products
)


api_router = APIRouter()

api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(ingredients.router)
# sub-resources first so /products/{product_id} does not swallow them
api_router.include_router(product_images.router)
api_router.include_router(product_ingredients.router)
api_router.include_router(products.router)
