"""Enums for model fields."""

from enum import Enum


class AuthProvider(str, Enum):
    """Source of an account's credentials."""

    EMAIL = "email"
    GOOGLE = "google"
    GITHUB = "github"
