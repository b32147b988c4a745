"""Pydantic schemas for API request/response validation."""

from eventsapp.schemas.auth import (
    Identity,
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserRegister,
)
from eventsapp.schemas.base import MessageResponse
from eventsapp.schemas.event import (
    EventCreate,
    EventListResponse,
    EventResponse,
    EventUpdate,
    EventUpdateResponse,
)
from eventsapp.schemas.registration import (
    RegistrationCreate,
    RegistrationResponse,
    RegistrationUpdate,
)
from eventsapp.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "EventCreate",
    "EventListResponse",
    "EventResponse",
    "EventUpdate",
    "EventUpdateResponse",
    "Identity",
    "LoginResponse",
    "MessageResponse",
    "RegisterResponse",
    "RegistrationCreate",
    "RegistrationResponse",
    "RegistrationUpdate",
    "UserCreate",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "UserUpdate",
]
