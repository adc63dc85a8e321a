"""
Session Entity - an issued bearer token bound to one user until a fixed expiry.
"""

from dataclasses import dataclass
from chat_service.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Session:
    token: str
    user_id: UserId
    expiry: int  # epoch milliseconds

    def is_expired(self, now_ms: int) -> bool:
        """Single expiry rule shared by lookup and sweep."""
        return self.expiry <= now_ms
