"""
User Entity - a chat participant. The password never leaves the credential store.
"""

from dataclasses import dataclass
from chat_service.domain.value_objects.user_id import UserId


@dataclass
class User:
    id: UserId
    name: str
    profile_picture_url: str = ""
