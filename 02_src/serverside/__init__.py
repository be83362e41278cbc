"""Server-side pixel event SDK."""

from .models import Content, CustomData, Event, UserData
from .serialization import events_to_json, serialize_event, serialize_events

__all__ = [
    # Models
    "Event",
    "UserData",
    "CustomData",
    "Content",
    # Serialization
    "serialize_event",
    "serialize_events",
    "events_to_json",
]
