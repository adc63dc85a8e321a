"""
API Routers - FastAPI endpoint definitions.

ROUTERS is the dispatch order; the app includes them in exactly this order.
"""

from chat_service.presentation.api.auth import router as auth_router
from chat_service.presentation.api.users import router as users_router
from chat_service.presentation.api.messages import router as messages_router
from chat_service.presentation.api.channels import router as channels_router

ROUTERS = (
    auth_router,
    users_router,
    messages_router,
    channels_router,
)

__all__ = [
    "auth_router",
    "users_router",
    "messages_router",
    "channels_router",
    "ROUTERS",
]
