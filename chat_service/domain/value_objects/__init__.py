"""
VALUE OBJECTS - Immutable domain types, validated on creation.
"""

from chat_service.domain.value_objects.user_id import UserId
from chat_service.domain.value_objects.message_id import MessageId

__all__ = [
    "UserId",
    "MessageId",
]
