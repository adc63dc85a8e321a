"""Message queries."""

from .list_messages import ListMessagesQuery, ListMessagesHandler

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
]
