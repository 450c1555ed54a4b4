# app/models/user.py
from tortoise import Model, fields


class AdminUser(Model):
    """
    Admin account allowed to log into the catalog back office.
    """

    id = fields.IntField(pk=True)
    username = fields.CharField(max_length=100, unique=True, index=True)
    password_hash = fields.CharField(max_length=255)
    email = fields.CharField(max_length=255)
    created_at = fields.DatetimeField(auto_now_add=True)
    last_login = fields.DatetimeField(null=True)

    class Meta:
        table = "admin_users"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"AdminUser {self.username}"
