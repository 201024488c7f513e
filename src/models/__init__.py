"""SQLAlchemy models."""

from src.models.account import Account
from src.models.user import User

__all__ = [
    "User",
    "Account",
]
