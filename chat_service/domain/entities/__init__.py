"""
ENTITIES - Business objects with identity.
Pure Python dataclasses (no ORM, no Pydantic).
"""

from chat_service.domain.entities.user import User
from chat_service.domain.entities.message import Message, NewMessage
from chat_service.domain.entities.session import Session

__all__ = [
    "User",
    "Message",
    "NewMessage",
    "Session",
]
