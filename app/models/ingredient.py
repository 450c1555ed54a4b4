# app/models/ingredient.py
from tortoise import Model, fields


class Ingredient(Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=50, unique=True)

    product_links: fields.ReverseRelation["ProductIngredient"]

    class Meta:
        table = "ingredients"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
