"""Resolve-or-fail lookups shared by every service.

All NotFound errors for a given entity come from here so the message and
status are identical on create, read, update and delete paths.
"""

from sqlalchemy.orm import Session

from eventsapp.exceptions import NotFoundError
from eventsapp.models.event import Event
from eventsapp.models.registration import Registration
from eventsapp.models.user import User


def resolve_user(db: Session, user_id: int) -> User:
    """Get a user by id or raise NotFoundError."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError(f"User with ID {user_id} not found")
    return user


def resolve_event(db: Session, event_id: int) -> Event:
    """Get an event by id or raise NotFoundError."""
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFoundError(f"Event with ID {event_id} not found")
    return event


def resolve_registration(db: Session, registration_id: int) -> Registration:
    """Get a registration by id or raise NotFoundError."""
    registration = db.query(Registration).filter(Registration.id == registration_id).first()
    if not registration:
        raise NotFoundError(f"Registration with ID {registration_id} not found")
    return registration
