"""User management service."""

import logging

from sqlalchemy.orm import Session

from eventsapp.exceptions import BadRequestError, ConflictError
from eventsapp.models.registration import Registration
from eventsapp.models.user import User
from eventsapp.schemas.user import UserCreate, UserUpdate
from eventsapp.services.auth import get_user_by_email, register_user
from eventsapp.services.lookups import resolve_user
from eventsapp.services.persistence import commit_or_conflict
from eventsapp.services.security import get_password_hash

logger = logging.getLogger(__name__)

EMAIL_IN_USE_MESSAGE = "Email is already in use"


class UserService:
    """CRUD over user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def get_user(self, user_id: int) -> User:
        return resolve_user(self.db, user_id)

    def create_user(self, data: UserCreate) -> User:
        if get_user_by_email(self.db, data.email):
            raise ConflictError(EMAIL_IN_USE_MESSAGE)
        return register_user(self.db, data.email, data.password, data.name, data.role)

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Apply a partial update.

        A changed email is checked for uniqueness; a new password is re-hashed.
        """
        user = resolve_user(self.db, user_id)

        if data.email is not None and data.email != user.email:
            if get_user_by_email(self.db, data.email):
                raise ConflictError(EMAIL_IN_USE_MESSAGE)
            user.email = data.email
        if data.name is not None:
            user.name = data.name
        if data.password is not None:
            user.password_hash = get_password_hash(data.password)
        if data.role is not None:
            user.role = data.role.value

        commit_or_conflict(self.db, EMAIL_IN_USE_MESSAGE)
        self.db.refresh(user)
        logger.info(f"Updated user {user.id}")
        return user

    def delete_user(self, user_id: int) -> None:
        """Hard delete a user that has no registrations."""
        user = resolve_user(self.db, user_id)

        registration_count = (
            self.db.query(Registration).filter(Registration.user_id == user_id).count()
        )
        if registration_count:
            raise BadRequestError(
                f"User with ID {user_id} has {registration_count} registration(s); "
                "delete them first"
            )

        self.db.delete(user)
        commit_or_conflict(
            self.db, f"User with ID {user_id} has registrations; delete them first"
        )
        logger.info(f"Deleted user {user_id}")
