"""Registration service: the user × event join and its integrity rules."""

import logging

from sqlalchemy.orm import Session

from eventsapp.exceptions import NotFoundError
from eventsapp.models.enums import UserRole
from eventsapp.models.registration import Registration
from eventsapp.schemas.auth import Identity
from eventsapp.schemas.registration import RegistrationCreate, RegistrationUpdate
from eventsapp.services.lookups import resolve_event, resolve_registration, resolve_user
from eventsapp.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)

STALE_REFERENCE_MESSAGE = "The referenced user or event no longer exists"


class RegistrationService:
    """Create, read, update and delete registrations.

    Every write resolves the referenced user and event first, so a
    registration never points at a row that does not exist at write time.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_registration(self, data: RegistrationCreate) -> Registration:
        user = resolve_user(self.db, data.user_id)
        event = resolve_event(self.db, data.event_id)

        registration = Registration(user=user, event=event)
        self.db.add(registration)
        commit_or_conflict(self.db, STALE_REFERENCE_MESSAGE)
        self.db.refresh(registration)
        logger.info(
            f"Registered user {user.id} for event {event.id} (registration {registration.id})"
        )
        return registration

    def list_registrations(self, identity: Identity) -> list[Registration]:
        """All registrations, or only the caller's own when they are an attendee."""
        query = self.db.query(Registration)
        if identity.role == UserRole.ATTENDEE:
            query = query.filter(Registration.user_id == identity.user_id)
        return query.order_by(Registration.id).all()

    def get_registration(self, registration_id: int, identity: Identity) -> Registration:
        """Get one registration.

        Attendees asking for someone else's registration get the same
        NotFound as for a missing id.
        """
        registration = resolve_registration(self.db, registration_id)
        if identity.role == UserRole.ATTENDEE and registration.user_id != identity.user_id:
            raise NotFoundError(f"Registration with ID {registration_id} not found")
        return registration

    def update_registration(
        self, registration_id: int, data: RegistrationUpdate
    ) -> Registration:
        """Swap the user and/or event of a registration.

        Each supplied reference is resolved on its own before it is applied.
        Callers must reject payloads with no fields set.
        """
        registration = resolve_registration(self.db, registration_id)

        if data.user_id is not None:
            registration.user = resolve_user(self.db, data.user_id)
        if data.event_id is not None:
            registration.event = resolve_event(self.db, data.event_id)

        commit_or_conflict(self.db, STALE_REFERENCE_MESSAGE)
        self.db.refresh(registration)
        logger.info(f"Updated registration {registration.id}")
        return registration

    def delete_registration(self, registration_id: int) -> Registration:
        """Delete one registration and return it. Users and events are untouched."""
        registration = resolve_registration(self.db, registration_id)

        self.db.delete(registration)
        self.db.commit()
        logger.info(f"Deleted registration {registration_id}")
        return registration
