"""Registration API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from eventsapp.api.dependencies import get_registration_service, require_update_fields
from eventsapp.api.policy import authorize
from eventsapp.schemas.auth import Identity
from eventsapp.schemas.registration import (
    RegistrationCreate,
    RegistrationResponse,
    RegistrationUpdate,
)
from eventsapp.services.registrations import RegistrationService

router = APIRouter(
    prefix="/registrations", tags=["registrations"], dependencies=[Depends(authorize)]
)


@router.post("", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
def create_registration(
    registration_data: RegistrationCreate,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
):
    """Register a user for an event. Both must exist."""
    return service.create_registration(registration_data)


@router.get("", response_model=list[RegistrationResponse])
def list_registrations(
    identity: Annotated[Identity, Depends(authorize)],
    service: Annotated[RegistrationService, Depends(get_registration_service)],
):
    """List registrations. Attendees only see their own."""
    return service.list_registrations(identity)


@router.get("/{registration_id}", response_model=RegistrationResponse)
def get_registration(
    registration_id: int,
    identity: Annotated[Identity, Depends(authorize)],
    service: Annotated[RegistrationService, Depends(get_registration_service)],
):
    """Get a specific registration."""
    return service.get_registration(registration_id, identity)


@router.put("/{registration_id}", response_model=RegistrationResponse)
def update_registration(
    registration_id: int,
    registration_data: RegistrationUpdate,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
):
    """Change the user and/or event of a registration."""
    require_update_fields(registration_data)
    return service.update_registration(registration_id, registration_data)


@router.delete("/{registration_id}", response_model=RegistrationResponse)
def delete_registration(
    registration_id: int,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
):
    """Delete a registration and return what was removed."""
    return service.delete_registration(registration_id)
