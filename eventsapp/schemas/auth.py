"""Authentication schemas."""

from pydantic import EmailStr, Field

from eventsapp.models.enums import UserRole
from eventsapp.schemas.base import CamelModel, RequestModel

PASSWORD_MIN_LENGTH = 5
PASSWORD_MAX_LENGTH = 12


class UserRegister(RequestModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    role: UserRole | None = None


class UserLogin(RequestModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)


class Identity(CamelModel):
    """The caller, as decoded from a verified bearer token."""

    user_id: int
    name: str | None = None
    email: str
    role: UserRole


class RegisteredUser(CamelModel):
    """Minimal view of a freshly registered user."""

    id: int
    email: str


class RegisterResponse(CamelModel):
    """Registration response."""

    message: str
    user: RegisteredUser


class LoginUser(CamelModel):
    """User summary returned alongside the token."""

    name: str
    role: UserRole


class LoginResponse(CamelModel):
    """Login response with the signed access token."""

    message: str
    access_token: str
    token_type: str = "bearer"  # noqa: S105
    user: LoginUser
