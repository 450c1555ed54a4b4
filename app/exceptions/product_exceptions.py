# app/exceptions/product_exceptions.py
class ProductException(Exception):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundError(ProductException):
    """Raised when product is not found in database."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")


class ProductAlreadyExistsError(ProductException):
    """Raised when product slug is already used."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Product with slug {slug} already exists")


class ProductImageNotFoundError(ProductException):
    """Raised when product image is not found."""

    def __init__(self, image_id: int):
        self.image_id = image_id
        super().__init__(f"Product image with id {image_id} not found")


class ProductIngredientNotFoundError(ProductException):
    """Raised when a product-ingredient link is not found."""

    def __init__(self, product_id: int, ingredient_id: int):
        self.product_id = product_id
        self.ingredient_id = ingredient_id
        super().__init__(
            f"Ingredient {ingredient_id} is not linked to product {product_id}"
        )


class ProductIngredientAlreadyExistsError(ProductException):
    """Raised when a product-ingredient link already exists."""

    def __init__(self, product_id: int, ingredient_id: int):
        self.product_id = product_id
        self.ingredient_id = ingredient_id
        super().__init__(
            f"Ingredient {ingredient_id} is already linked to product {product_id}"
        )
