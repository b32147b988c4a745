"""Registration schemas."""

from datetime import datetime

from pydantic import PositiveInt

from eventsapp.models.enums import UserRole
from eventsapp.schemas.base import CamelModel, RequestModel


class RegistrationCreate(RequestModel):
    """Register a user for an event."""

    user_id: PositiveInt
    event_id: PositiveInt


class RegistrationUpdate(RequestModel):
    """Move a registration to another user and/or event."""

    user_id: PositiveInt | None = None
    event_id: PositiveInt | None = None


class RegistrationUser(CamelModel):
    """User side of a registration."""

    id: int
    name: str
    email: str
    role: UserRole


class RegistrationEvent(CamelModel):
    """Event side of a registration."""

    id: int
    title: str
    date: datetime
    location: str


class RegistrationResponse(CamelModel):
    """Registration response with both ends resolved."""

    id: int
    user_id: int
    event_id: int
    registered_at: datetime
    user: RegistrationUser
    event: RegistrationEvent
