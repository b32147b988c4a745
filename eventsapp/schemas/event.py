"""Event schemas."""

from datetime import datetime

from pydantic import EmailStr, Field, PositiveInt

from eventsapp.schemas.base import CamelModel, RequestModel


class EventCreate(RequestModel):
    """Create a new event."""

    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=500)
    date: datetime
    location: str = Field(..., min_length=3, max_length=100)
    capacity: PositiveInt | None = None
    email: EmailStr | None = Field(None, max_length=255)


class EventUpdate(RequestModel):
    """Update an event."""

    title: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, min_length=10, max_length=500)
    date: datetime | None = None
    location: str | None = Field(None, min_length=3, max_length=100)
    capacity: PositiveInt | None = None
    email: EmailStr | None = Field(None, max_length=255)


class EventResponse(CamelModel):
    """Event response."""

    id: int
    title: str
    description: str
    date: datetime
    location: str
    capacity: int
    email: str
    created_at: datetime
    updated_at: datetime


class EventListResponse(CamelModel):
    """All events plus their count."""

    total: int
    events: list[EventResponse]


class EventUpdateResponse(CamelModel):
    """Result of an event update."""

    message: str
    event: EventResponse
