# app/core/security.py
from datetime import datetime, timezone

import bcrypt

from app.core.config import settings


def hash_password(password: str) -> str:
    """
    Hash a plaintext password for storage.

    Args:
        password: Plain password

    Returns:
        bcrypt hash (salt included) as text
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Args:
        password: Plain password
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def get_current_utc_time() -> datetime:
    """
    Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)
