"""Typed application errors.

Services raise these; the handlers registered in ``eventsapp.main`` turn
them into the normalized error envelope.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str | list[str]):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Malformed or semantically invalid request."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BadRequestError):
    """A unique field (email, title) is already taken.

    Reported as 400 rather than 409.
    """


class UnauthenticatedError(AppError):
    """Missing, malformed, expired or otherwise unverifiable credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentialsError(UnauthenticatedError):
    """Login failed. Same message whether the email or the password was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ForbiddenError(AppError):
    """Authenticated, but the role is not allowed on this route."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    """A referenced record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
