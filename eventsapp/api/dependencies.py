"""FastAPI dependencies for authentication, services and request checks."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.orm import Session

from eventsapp.database import get_db
from eventsapp.exceptions import BadRequestError, UnauthenticatedError
from eventsapp.models.enums import UserRole
from eventsapp.schemas.auth import Identity
from eventsapp.services.events import EventService
from eventsapp.services.registrations import RegistrationService
from eventsapp.services.security import TokenError, TokenExpiredError, decode_access_token
from eventsapp.services.users import UserService

# auto_error=False so a missing header reaches our own 401 instead of FastAPI's.
security = HTTPBearer(auto_error=False)

INVALID_CREDENTIALS_DETAIL = "Invalid authentication credentials"


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Verify the bearer token and return the caller's identity.

    Purely token based: signature and expiry are checked, the database is not.
    """
    if credentials is None:
        raise UnauthenticatedError("Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
    except TokenExpiredError as e:
        raise UnauthenticatedError("Token has expired") from e
    except TokenError as e:
        raise UnauthenticatedError(INVALID_CREDENTIALS_DETAIL) from e

    try:
        return Identity(
            user_id=int(payload["sub"]),
            name=payload.get("name"),
            email=payload["email"],
            role=UserRole(payload["role"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise UnauthenticatedError(INVALID_CREDENTIALS_DETAIL) from e


def require_update_fields(payload: BaseModel) -> None:
    """Reject update payloads that set nothing."""
    if not payload.model_dump(exclude_none=True):
        raise BadRequestError("You must supply at least one field to update")


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_event_service(
    db: Annotated[Session, Depends(get_db)],
) -> EventService:
    """Get event service with dependencies."""
    return EventService(db)


def get_registration_service(
    db: Annotated[Session, Depends(get_db)],
) -> RegistrationService:
    """Get registration service with dependencies."""
    return RegistrationService(db)
