"""Authentication service for sign-up and password handling."""

import logging
import uuid
from collections.abc import Callable

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.database import run_in_transaction
from src.models.account import Account
from src.models.enums import AuthProvider
from src.models.user import User
from src.schemas.auth import EmailSignUpRequest
from src.services.errors import EmailTakenError, InternalError, PasswordMismatchError
from src.services.validation import validate_sign_up_request

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__truncate_error=True)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def email_exists(db: Session, email: str) -> bool:
    """Check whether a user already uses this email (exact match)."""
    return db.query(User.id).filter(User.email == email).first() is not None


def create_email_account(db: Session, user_id: uuid.UUID, password_hash: str) -> Account:
    """Add the email/password account for a user to the session."""
    account = Account(
        id=uuid.uuid4(),
        user_id=user_id,
        provider=AuthProvider.EMAIL,
        password_hash=password_hash,
    )
    db.add(account)
    db.flush()
    return account


class AuthService:
    """Service for signing up users with email and password."""

    def __init__(
        self,
        db: Session,
        validator: Callable[[EmailSignUpRequest], None] = validate_sign_up_request,
        hasher: Callable[[str], str] = get_password_hash,
    ):
        self.db = db
        self.validator = validator
        self.hasher = hasher

    def sign_up(self, request: EmailSignUpRequest) -> User:
        """Create a user and its email account.

        Both rows are written in one transaction; on any failure neither is
        persisted and a SignUpError subclass is raised.
        """
        self.validator(request)

        if request.password != request.confirm_password:
            raise PasswordMismatchError()

        if email_exists(self.db, request.email):
            raise EmailTakenError()

        try:
            password_hash = self.hasher(request.password)
        except Exception as e:
            logger.error(f"Password hashing failed: {e}")
            raise InternalError() from e

        def create_user_with_account(db: Session) -> User:
            user = User(
                id=uuid.uuid4(),
                first_name=request.first_name,
                last_name=request.last_name,
                user_name=request.user_name,
                email=request.email,
                is_email_verified=False,
            )
            db.add(user)
            db.flush()
            create_email_account(db, user.id, password_hash)
            return user

        try:
            user = run_in_transaction(self.db, create_user_with_account)
        except IntegrityError as e:
            # A concurrent sign-up can pass the pre-check; the unique
            # constraint on users.email decides.
            if email_exists(self.db, request.email):
                raise EmailTakenError() from None
            logger.error(f"Sign up integrity error: {e}")
            raise InternalError() from e
        except SQLAlchemyError as e:
            logger.error(f"Sign up transaction failed: {e}")
            raise InternalError() from e

        logger.info(f"Signed up user {user.id}")
        return user
