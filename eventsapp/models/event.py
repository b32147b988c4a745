"""Event model."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from eventsapp.database import Base
from eventsapp.models.mixins import TimestampMixin

DEFAULT_CAPACITY = 100


class Event(Base, TimestampMixin):
    """An event attendees can be registered for."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    location = Column(String(255), nullable=False)
    capacity = Column(
        Integer, nullable=False, default=DEFAULT_CAPACITY, server_default=str(DEFAULT_CAPACITY)
    )
    email = Column(String(255), nullable=False)  # responsible party

    # Relationships
    registrations = relationship("Registration", back_populates="event")
