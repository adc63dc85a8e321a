"""Message commands."""

from .post_message import PostMessageCommand, PostMessageHandler

__all__ = [
    "PostMessageCommand",
    "PostMessageHandler",
]
