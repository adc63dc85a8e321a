"""
Message Entity - a single chat message posted to a channel.

Messages are immutable once stored. A NewMessage is what the application
hands to the repository; the store assigns id and created_at.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from chat_service.domain.value_objects.message_id import MessageId
from chat_service.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class NewMessage:
    body: str
    user_id: UserId
    channel: str
    attachments: tuple[str, ...] = ()
    in_reply_to: Optional[MessageId] = None

    def __post_init__(self):
        if not self.body:
            raise ValueError("Message body cannot be empty")
        if not self.channel.strip():
            raise ValueError("Message channel cannot be empty")

    @classmethod
    def create(
        cls,
        body: str,
        user_id: UserId,
        default_channel: str,
        channel: Optional[str] = None,
        attachments: Optional[list[str]] = None,
        in_reply_to: Optional[int] = None,
    ) -> NewMessage:
        """
        Build a message, filling server-side defaults for omitted fields.

        A blank channel counts as omitted, since it could never be listed.
        """
        if channel is None or not channel.strip():
            channel = default_channel
        return cls(
            body=body,
            user_id=user_id,
            channel=channel,
            attachments=tuple(attachments or ()),
            in_reply_to=MessageId(in_reply_to) if in_reply_to is not None else None,
        )


@dataclass(frozen=True)
class Message:
    id: MessageId
    body: str
    user_id: UserId
    channel: str
    created_at: datetime
    attachments: tuple[str, ...] = field(default_factory=tuple)
    in_reply_to: Optional[MessageId] = None
