"""Convert Event value objects into their wire representation."""

from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from pydantic import ValidationError

from ..logging_config import get_logger
from ..models import Event
from .schemas import EventPayload, EventsPayload

logger = get_logger(__name__)


def to_payload(event: Event) -> EventPayload:
    """Validate an Event against the wire schema."""
    context = {"event_name": event.event_name, "event_id": event.event_id}
    try:
        payload = EventPayload.model_validate(asdict(event))
    except ValidationError as e:
        logger.warning(
            "Event failed wire validation: %s", e.error_count(), extra={"context": context}
        )
        raise
    logger.debug("Serialized event", extra={"context": context})
    return payload


def serialize_event(event: Event) -> dict[str, Any]:
    """
    Serialize an Event to a JSON-ready dict.

    Unset fields are omitted at every level rather than sent as nulls.
    Field presence is not checked: an empty Event serializes to {}.

    Raises:
        pydantic.ValidationError: a field value cannot be coerced to its
            wire type (e.g. a non-integer event_time).
    """
    return to_payload(event).model_dump(by_alias=True, exclude_none=True)


def serialize_events(events: Iterable[Event]) -> list[dict[str, Any]]:
    """Serialize events in order."""
    return [serialize_event(event) for event in events]


def events_to_json(events: Iterable[Event]) -> str:
    """Render events as a JSON body of the form {"data": [...]}."""
    payload = EventsPayload(data=[to_payload(event) for event in events])
    return payload.model_dump_json(by_alias=True, exclude_none=True)
