# app/entities/user.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class UserEntity:
    id: int
    username: str
    password_hash: str
    email: str
    created_at: datetime
    last_login: Optional[datetime] = None
