"""Authentication service: registration and login."""

import logging

from sqlalchemy.orm import Session

from eventsapp.exceptions import ConflictError, InvalidCredentialsError
from eventsapp.models.enums import UserRole
from eventsapp.models.user import User
from eventsapp.services.persistence import commit_or_conflict
from eventsapp.services.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)

# Deliberately vague so the register endpoint does not confirm which emails exist.
REGISTRATION_CONFLICT_MESSAGE = "Unable to register with the provided data"


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def register_user(
    db: Session,
    email: str,
    password: str,
    name: str,
    role: UserRole | None = None,
) -> User:
    """Create a new user with a hashed password.

    Raises ConflictError if the email is already registered.
    """
    if get_user_by_email(db, email):
        raise ConflictError(REGISTRATION_CONFLICT_MESSAGE)

    user = User(
        email=email,
        password_hash=get_password_hash(password),
        name=name,
        role=(role or UserRole.ATTENDEE).value,
    )
    db.add(user)
    commit_or_conflict(db, REGISTRATION_CONFLICT_MESSAGE)
    db.refresh(user)
    logger.info(f"Registered user {user.id} with role {user.role}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password raise the same error.
    """
    user = get_user_by_email(db, email)
    if not user:
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def issue_token(user: User) -> str:
    """Sign an access token for ``user``."""
    return create_access_token(
        {
            "sub": str(user.id),
            "name": user.name,
            "email": user.email,
            "role": user.role,
        }
    )


def login(db: Session, email: str, password: str) -> tuple[str, User]:
    """Verify credentials and return ``(access_token, user)``."""
    user = authenticate_user(db, email, password)
    token = issue_token(user)
    logger.info(f"User {user.id} logged in")
    return token, user
