"""
Login Command.

Verifies a name/password pair against the credential store and, on a match,
issues a bearer session for that user.
"""

import logging
from dataclasses import dataclass
from chat_service.application.common.interfaces import Command, CommandHandler
from chat_service.domain.entities.session import Session
from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.infrastructure.sessions.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Name/password pair did not match any user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


@dataclass(frozen=True)
class LoginCommand(Command[Session]):
    name: str
    password: str

    def __repr__(self) -> str:
        return f"LoginCommand(name={self.name!r}, password='***')"


class LoginHandler(CommandHandler[Session]):
    def __init__(
        self, credential_store: CredentialStore, session_registry: SessionRegistry
    ):
        self._credential_store = credential_store
        self._session_registry = session_registry

    async def execute(self, command: LoginCommand) -> Session:
        user = await self._credential_store.verify(command.name, command.password)
        if user is None:
            logger.info(f"Login rejected for {command.name!r}")
            raise InvalidCredentialsError()
        return self._session_registry.issue(user.id)
