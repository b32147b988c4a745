"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from eventsapp.database import Base
from eventsapp.models.enums import UserRole
from eventsapp.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and role-based access."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(
        String(20),
        nullable=False,
        default=UserRole.ATTENDEE.value,
        server_default=UserRole.ATTENDEE.value,
    )

    # Relationships
    registrations = relationship("Registration", back_populates="user")
