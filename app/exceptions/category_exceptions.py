# app/exceptions/category_exceptions.py
class CategoryException(Exception):
    """Base exception for category-related errors."""
    pass


class CategoryNotFoundError(CategoryException):
    """Raised when category is not found."""

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category with id {category_id} not found")


class CategoryAlreadyExistsError(CategoryException):
    """Raised when category name is already used."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Category with name {name} already exists")
