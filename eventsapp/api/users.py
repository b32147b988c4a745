"""User management API endpoints (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from eventsapp.api.dependencies import get_user_service, require_update_fields
from eventsapp.api.policy import authorize
from eventsapp.schemas.base import MessageResponse
from eventsapp.schemas.user import UserCreate, UserResponse, UserUpdate
from eventsapp.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(authorize)])


@router.get("", response_model=list[UserResponse])
def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
):
    """List all users."""
    return service.list_users()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Create a user with any role."""
    return service.create_user(user_data)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a specific user."""
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update a user."""
    require_update_fields(user_data)
    return service.update_user(user_id, user_data)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Delete a user that has no registrations."""
    service.delete_user(user_id)
    return MessageResponse(message=f"User with ID {user_id} deleted")
