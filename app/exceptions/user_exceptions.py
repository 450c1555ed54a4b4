# app/exceptions/user_exceptions.py
class UserException(Exception):
    """Base exception for admin user errors."""
    pass


class UserNotFoundError(UserException):
    """Raised when user is not found."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class UserAlreadyExistsError(UserException):
    """Raised when username is already taken."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User with username {username} already exists")


class InvalidCredentialsError(UserException):
    """Raised when credentials are invalid."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
