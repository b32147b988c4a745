"""SQLAlchemy models."""

from eventsapp.models.enums import UserRole
from eventsapp.models.event import Event
from eventsapp.models.registration import Registration
from eventsapp.models.user import User

__all__ = [
    "User",
    "UserRole",
    "Event",
    "Registration",
]
