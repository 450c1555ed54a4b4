# app/models/product.py
from tortoise import Model, fields


class Product(Model):
    """
    Product database model representing a sellable catalog item.
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100)
    slug = fields.CharField(max_length=255, unique=True, index=True)
    description = fields.TextField(null=True)
    price = fields.DecimalField(max_digits=8, decimal_places=2)
    category = fields.ForeignKeyField(
        "models.Category",
        related_name="products",
        null=True,
        on_delete=fields.SET_NULL
    )
    is_available = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    images: fields.ReverseRelation["ProductImage"]
    ingredient_links: fields.ReverseRelation["ProductIngredient"]

    class Meta:
        table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class ProductImage(Model):
    """
    Image attached to a product, shown in ascending sort_order.
    """

    id = fields.IntField(pk=True)
    product = fields.ForeignKeyField(
        "models.Product",
        related_name="images",
        on_delete=fields.CASCADE
    )
    image_url = fields.CharField(max_length=500)
    alt_text = fields.CharField(max_length=255, null=True)
    sort_order = fields.SmallIntField(default=0)

    class Meta:
        table = "product_images"
        ordering = ["sort_order", "id"]


class ProductIngredient(Model):
    """
    Link row between a product and one of its ingredients.
    """

    id = fields.IntField(pk=True)
    product = fields.ForeignKeyField(
        "models.Product",
        related_name="ingredient_links",
        on_delete=fields.CASCADE
    )
    ingredient = fields.ForeignKeyField(
        "models.Ingredient",
        related_name="product_links",
        on_delete=fields.CASCADE
    )

    class Meta:
        table = "product_ingredients"
        unique_together = (("product", "ingredient"),)
        ordering = ["id"]
