"""Commit helper that maps constraint violations to ConflictError."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventsapp.exceptions import ConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit the session, turning a constraint violation into ConflictError.

    Uniqueness and reference checks made before a write are not
    transactional. Under concurrent writes the unique and foreign-key
    constraints are what actually hold, and this is where they surface.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error on commit: {e.orig}")
        raise ConflictError(message) from e
