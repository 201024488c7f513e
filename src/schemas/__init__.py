"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    EmailSignUpConstraints,
    EmailSignUpRequest,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "EmailSignUpRequest",
    "EmailSignUpConstraints",
    "MessageResponse",
    "ErrorResponse",
]
