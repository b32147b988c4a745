"""Event service."""

import logging

from sqlalchemy.orm import Session

from eventsapp.exceptions import BadRequestError, ConflictError
from eventsapp.models.event import DEFAULT_CAPACITY, Event
from eventsapp.models.registration import Registration
from eventsapp.schemas.event import EventCreate, EventUpdate
from eventsapp.services.lookups import resolve_event
from eventsapp.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)

TITLE_IN_USE_MESSAGE = "An event with that title already exists"


class EventService:
    """CRUD over events."""

    def __init__(self, db: Session):
        self.db = db

    def _title_taken(self, title: str) -> bool:
        return self.db.query(Event.id).filter(Event.title == title).first() is not None

    def list_events(self) -> list[Event]:
        return self.db.query(Event).order_by(Event.id).all()

    def count_events(self) -> int:
        return self.db.query(Event).count()

    def get_event(self, event_id: int) -> Event:
        return resolve_event(self.db, event_id)

    def create_event(self, data: EventCreate, default_email: str) -> Event:
        """Create an event.

        ``default_email`` is used as the responsible party when the payload
        does not name one.
        """
        if self._title_taken(data.title):
            raise ConflictError(TITLE_IN_USE_MESSAGE)

        event = Event(
            title=data.title,
            description=data.description,
            date=data.date,
            location=data.location,
            capacity=data.capacity or DEFAULT_CAPACITY,
            email=data.email or default_email,
        )
        self.db.add(event)
        commit_or_conflict(self.db, TITLE_IN_USE_MESSAGE)
        self.db.refresh(event)
        logger.info(f"Created event {event.id}: '{event.title}'")
        return event

    def update_event(self, event_id: int, data: EventUpdate) -> Event:
        event = resolve_event(self.db, event_id)

        if data.title is not None and data.title != event.title:
            if self._title_taken(data.title):
                raise ConflictError(TITLE_IN_USE_MESSAGE)
            event.title = data.title
        if data.description is not None:
            event.description = data.description
        if data.date is not None:
            event.date = data.date
        if data.location is not None:
            event.location = data.location
        if data.capacity is not None:
            event.capacity = data.capacity
        if data.email is not None:
            event.email = data.email

        commit_or_conflict(self.db, TITLE_IN_USE_MESSAGE)
        self.db.refresh(event)
        logger.info(f"Updated event {event.id}")
        return event

    def delete_event(self, event_id: int) -> Event:
        """Delete an event that has no registrations and return it."""
        event = resolve_event(self.db, event_id)

        registration_count = (
            self.db.query(Registration).filter(Registration.event_id == event_id).count()
        )
        if registration_count:
            raise BadRequestError(
                f"Event with ID {event_id} has {registration_count} registration(s); "
                "delete them first"
            )

        self.db.delete(event)
        commit_or_conflict(
            self.db, f"Event with ID {event_id} has registrations; delete them first"
        )
        logger.info(f"Deleted event {event_id}")
        return event
