"""User model."""

import uuid

from sqlalchemy import Boolean, Column, String, Uuid, false
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """A registered person; credentials live on the linked accounts."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    user_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    is_email_verified = Column(Boolean, default=False, server_default=false(), nullable=False)

    # Relationships
    accounts = relationship("Account", back_populates="user")
