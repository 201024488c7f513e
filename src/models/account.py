"""Account model."""

import uuid

from sqlalchemy import Column, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import AuthProvider
from src.models.mixins import TimestampMixin


class Account(Base, TimestampMixin):
    """Credential record linking a user to one auth provider."""

    __tablename__ = "accounts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    provider = Column(
        Enum(
            AuthProvider,
            name="auth_provider",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    # Identifier assigned by an external provider; NULL for email accounts
    provider_id = Column(String(255), unique=True, nullable=True)
    # Only set for email accounts
    password_hash = Column(String(255), nullable=True)

    # Relationships
    user = relationship("User", back_populates="accounts")

    def __repr__(self) -> str:
        return f"<Account id={self.id} provider={self.provider} user_id={self.user_id}>"
