"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold."""

    ADMIN = "admin"
    ORGANIZER = "organizer"
    ATTENDEE = "attendee"

    def is_staff(self) -> bool:
        """Check if this role may manage events and registrations."""
        return self in (UserRole.ADMIN, UserRole.ORGANIZER)
