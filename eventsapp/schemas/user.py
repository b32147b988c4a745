"""User management schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from eventsapp.models.enums import UserRole
from eventsapp.schemas.auth import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH, UserRegister
from eventsapp.schemas.base import CamelModel, RequestModel


class UserCreate(UserRegister):
    """Create a user (admin)."""


class UserUpdate(RequestModel):
    """Update a user. Every field is optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)
    password: str | None = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    role: UserRole | None = None


class UserResponse(CamelModel):
    """User response. Never carries the password hash."""

    id: int
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
