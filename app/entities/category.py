# app/entities/category.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CategoryEntity:
    id: int
    name: str
    description: Optional[str]
    created_at: datetime
