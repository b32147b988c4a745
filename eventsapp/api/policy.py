"""Role-based authorization.

Every protected route is listed in ``ROUTE_ROLES`` with the roles allowed
to call it. ``authorize`` is the one dependency that enforces the table;
routers attach it and handlers receive the resulting ``Identity``.
"""

from typing import Annotated

from fastapi import Depends, Request

from eventsapp.api.dependencies import get_current_identity
from eventsapp.exceptions import ForbiddenError, UnauthenticatedError
from eventsapp.models.enums import UserRole
from eventsapp.schemas.auth import Identity

ALL_ROLES = frozenset(UserRole)
STAFF = frozenset(role for role in UserRole if role.is_staff())
ADMIN_ONLY = frozenset({UserRole.ADMIN})

# (method, route path) -> allowed roles. None means any authenticated caller.
ROUTE_ROLES: dict[tuple[str, str], frozenset[UserRole] | None] = {
    ("GET", "/auth/profile"): None,
    # Users
    ("GET", "/users"): ADMIN_ONLY,
    ("POST", "/users"): ADMIN_ONLY,
    ("GET", "/users/{user_id}"): ADMIN_ONLY,
    ("PUT", "/users/{user_id}"): ADMIN_ONLY,
    ("DELETE", "/users/{user_id}"): ADMIN_ONLY,
    # Events
    ("GET", "/eventsapp"): ALL_ROLES,
    ("POST", "/eventsapp"): STAFF,
    ("GET", "/eventsapp/{event_id}"): ALL_ROLES,
    ("PUT", "/eventsapp/{event_id}"): STAFF,
    ("DELETE", "/eventsapp/{event_id}"): ADMIN_ONLY,
    # Registrations
    ("GET", "/registrations"): ALL_ROLES,
    ("POST", "/registrations"): STAFF,
    ("GET", "/registrations/{registration_id}"): ALL_ROLES,
    ("PUT", "/registrations/{registration_id}"): STAFF,
    ("DELETE", "/registrations/{registration_id}"): ADMIN_ONLY,
}


def check_roles(identity: Identity | None, allowed: frozenset[UserRole] | None) -> None:
    """Raise unless ``identity`` may call a route restricted to ``allowed``."""
    if identity is None:
        raise UnauthenticatedError("Not authenticated")
    if allowed is None:
        return
    if identity.role not in allowed:
        required = ", ".join(role.value for role in UserRole if role in allowed)
        raise ForbiddenError(
            f"Access denied. Current role: {identity.role.value}. Requires one of: {required}"
        )


def roles_for(method: str, path: str) -> frozenset[UserRole] | None:
    """Look up the allowed roles for a route.

    Routes missing from ``ROUTE_ROLES`` are denied outright.
    """
    key = (method.upper(), path)
    if key not in ROUTE_ROLES:
        raise ForbiddenError(f"Access denied. No access rule for {key[0]} {path}")
    return ROUTE_ROLES[key]


def authorize(
    request: Request,
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> Identity:
    """Authenticate the caller and enforce the matched route's roles."""
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    check_roles(identity, roles_for(request.method, path))
    return identity
