"""Serialization module."""

from .schemas import (
    ContentPayload,
    CustomDataPayload,
    EventPayload,
    EventsPayload,
    UserDataPayload,
)
from .serializer import events_to_json, serialize_event, serialize_events, to_payload

__all__ = [
    "ContentPayload",
    "CustomDataPayload",
    "EventPayload",
    "EventsPayload",
    "UserDataPayload",
    "events_to_json",
    "serialize_event",
    "serialize_events",
    "to_payload",
]
