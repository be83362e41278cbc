"""Value objects for server-side pixel events."""

from .custom_data import Content, CustomData
from .event import Event
from .user_data import UserData

__all__ = [
    # Event
    "Event",
    # Companions
    "UserData",
    "CustomData",
    "Content",
]
