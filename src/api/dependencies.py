"""FastAPI dependencies for services and database."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import AuthService, get_password_hash
from src.services.validation import validate_sign_up_request


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with its validator and password hasher."""
    return AuthService(db, validator=validate_sign_up_request, hasher=get_password_hash)
