"""Event API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from eventsapp.api.dependencies import get_event_service, require_update_fields
from eventsapp.api.policy import authorize
from eventsapp.schemas.auth import Identity
from eventsapp.schemas.base import MessageResponse
from eventsapp.schemas.event import (
    EventCreate,
    EventListResponse,
    EventResponse,
    EventUpdate,
    EventUpdateResponse,
)
from eventsapp.services.events import EventService

router = APIRouter(prefix="/eventsapp", tags=["events"], dependencies=[Depends(authorize)])


@router.get("", response_model=EventListResponse)
def list_events(
    service: Annotated[EventService, Depends(get_event_service)],
):
    """List all events with their total count."""
    events = service.list_events()
    return EventListResponse(
        total=service.count_events(),
        events=[EventResponse.model_validate(event) for event in events],
    )


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: int,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Get a specific event."""
    return service.get_event(event_id)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    event_data: EventCreate,
    identity: Annotated[Identity, Depends(authorize)],
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Create an event. The caller is the responsible party unless one is given."""
    return service.create_event(event_data, default_email=identity.email)


@router.put("/{event_id}", response_model=EventUpdateResponse)
def update_event(
    event_id: int,
    event_data: EventUpdate,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Update an event."""
    require_update_fields(event_data)
    event = service.update_event(event_id, event_data)
    return EventUpdateResponse(
        message=f"Event '{event.title}' updated",
        event=EventResponse.model_validate(event),
    )


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: int,
    service: Annotated[EventService, Depends(get_event_service)],
):
    """Delete an event that has no registrations."""
    event = service.delete_event(event_id)
    return MessageResponse(message=f"Event with ID {event_id} deleted (title: {event.title})")
