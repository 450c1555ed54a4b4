class IngredientException(Exception):
    """Base exception for ingredient-related errors."""
    pass


class IngredientNotFoundError(IngredientException):
    """Raised when ingredient is not found in database."""

    def __init__(self, ingredient_id: int):
        self.ingredient_id = ingredient_id
        super().__init__(f"Ingredient with id {ingredient_id} not found")


class IngredientAlreadyExistsError(IngredientException):
    """Raised when ingredient name is already used."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Ingredient with name {name} already exists")
