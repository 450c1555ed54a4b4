# app/models/category.py
from tortoise import Model, fields


class Category(Model):
    """
    Category grouping products in the catalog.
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100, unique=True)
    description = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    products: fields.ReverseRelation["Product"]

    class Meta:
        table = "categories"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
