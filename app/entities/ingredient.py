# app/entities/ingredient.py
from dataclasses import dataclass


@dataclass
class IngredientEntity:
    id: int
    name: str
