"""
Dishka DI Container Setup - application components.

- Scope.APP = created once per container, shared across requests
- Scope.REQUEST = new instance per HTTP request

Repository ports (UserRepository, MessageRepository, CredentialStore) are not
provided here; PersistenceProvider supplies the prisma implementations and
tests supply in-memory ones.

Flow:
  Container → provides → SessionRegistry + CredentialStore → to → LoginHandler
"""

import time
from typing import Callable

from dishka import Provider, Scope, provide

from chat_service.application.commands.auth import LoginHandler
from chat_service.application.commands.messages import PostMessageHandler
from chat_service.application.commands.users import UpdateProfileHandler
from chat_service.application.queries.channels import ListChannelsHandler
from chat_service.application.queries.messages import ListMessagesHandler
from chat_service.application.queries.users import ListUsersHandler
from chat_service.config.settings import Config
from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.domain.ports.repositories import MessageRepository, UserRepository
from chat_service.infrastructure.sessions.session_registry import SessionRegistry


class AppProvider(Provider):
    """
    Application dependency provider.

    Args:
        clock: time source for the session registry (epoch seconds)
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        super().__init__()
        self._clock = clock

    # ==================== SESSIONS ====================

    @provide(scope=Scope.APP)
    def get_session_registry(self) -> SessionRegistry:
        """
        One registry per container. Started and stopped by the app lifespan.
        """
        return SessionRegistry(
            ttl_seconds=Config.SESSION_TTL_SECONDS,
            sweep_interval_seconds=Config.SESSION_SWEEP_INTERVAL_SECONDS,
            clock=self._clock,
        )

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_login_handler(
        self, credential_store: CredentialStore, session_registry: SessionRegistry
    ) -> LoginHandler:
        return LoginHandler(credential_store, session_registry)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_handler(
        self, user_repository: UserRepository
    ) -> UpdateProfileHandler:
        return UpdateProfileHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_post_message_handler(
        self, message_repository: MessageRepository
    ) -> PostMessageHandler:
        return PostMessageHandler(
            message_repository, default_channel=Config.DEFAULT_CHANNEL
        )

    @provide(scope=Scope.REQUEST)
    def get_list_channels_handler(
        self, message_repository: MessageRepository
    ) -> ListChannelsHandler:
        return ListChannelsHandler(message_repository)
