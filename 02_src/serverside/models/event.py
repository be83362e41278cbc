"""Server-side pixel event model."""

from dataclasses import dataclass

from .custom_data import CustomData
from .formatting import describe, value_equals, value_hash
from .user_data import UserData


@dataclass(eq=False)
class Event:
    """
    A single pixel event to report to the conversions API.

    Every field is optional. ``None`` means the field was not provided and
    is kept distinct from falsy values such as ``opt_out=False``.
    No field is validated here; presence checks belong to the caller's
    transport layer.

    Fields can be assigned directly or through the chainable ``set_*``
    methods, which return the same instance:

        Event().set_event_name("Purchase").set_event_time(1700000000)
    """

    event_name: str | None = None  # Standard Event or Custom Event name
    event_time: int | None = None  # unix timestamp in seconds
    event_source_url: str | None = None
    opt_out: bool | None = None
    event_id: str | None = None
    user_data: UserData | None = None
    custom_data: CustomData | None = None

    def set_event_name(self, event_name: str | None) -> "Event":
        """Set the Standard Event or Custom Event name."""
        self.event_name = event_name
        return self

    def set_event_time(self, event_time: int | None) -> "Event":
        """Set the unix timestamp in seconds of when the event actually occurred."""
        self.event_time = event_time
        return self

    def set_event_source_url(self, event_source_url: str | None) -> "Event":
        """Set the browser URL where the event happened."""
        self.event_source_url = event_source_url
        return self

    def set_opt_out(self, opt_out: bool | None) -> "Event":
        """
        Set the ads delivery opt-out flag.

        If true, the event is only used for attribution and is excluded
        from ads delivery optimization.
        """
        self.opt_out = opt_out
        return self

    def set_event_id(self, event_id: str | None) -> "Event":
        """
        Set the deduplication ID.

        The ID is any string chosen by the advertiser. Server and browser
        submissions of the same event must carry the same ID, and an ID
        must not be reused for any other event, even with a different
        event_name or event_time.
        """
        self.event_id = event_id
        return self

    def set_user_data(self, user_data: UserData | None) -> "Event":
        """Set the UserData object that identifies the user."""
        self.user_data = user_data
        return self

    def set_custom_data(self, custom_data: CustomData | None) -> "Event":
        """Set the CustomData object with additional business data."""
        self.custom_data = custom_data
        return self

    def __eq__(self, other: object) -> bool:
        return value_equals(self, other)

    def __hash__(self) -> int:
        # Mutating a field changes the hash; don't mutate while in a set/dict.
        return value_hash(self)

    def __str__(self) -> str:
        return describe(self)
