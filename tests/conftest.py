"""
Shared fixtures.

The app under test runs on the real AppProvider (session registry, handlers)
with in-memory stores in place of prisma, and a controllable clock.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from chat_service.domain.entities.message import Message, NewMessage
from chat_service.domain.entities.user import User
from chat_service.domain.exceptions import EntityNotFoundError, PersistenceError
from chat_service.domain.ports.credential_store import CredentialStore
from chat_service.domain.ports.repositories import MessageRepository, UserRepository
from chat_service.domain.value_objects.message_id import MessageId
from chat_service.domain.value_objects.user_id import UserId
from chat_service.fastapi_app import create_fastapi_app
from chat_service.setup.ioc import AppProvider

START_TIME = 1_700_000_000.0


class FakeClock:
    """Epoch-seconds clock that only moves when told to."""

    def __init__(self, now: float = START_TIME):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryUserStore(UserRepository, CredentialStore):
    def __init__(self):
        self._users: dict[int, User] = {}
        self._passwords: dict[int, str] = {}
        self.fail = False

    def add_user(self, id: int, name: str, password: str, picture: str = "") -> User:
        user = User(id=UserId(id), name=name, profile_picture_url=picture)
        self._users[id] = user
        self._passwords[id] = password
        return user

    def remove_user(self, id: int) -> None:
        self._users.pop(id, None)
        self._passwords.pop(id, None)

    def get(self, id: int) -> Optional[User]:
        return self._users.get(id)

    def _check(self, operation: str) -> None:
        if self.fail:
            raise PersistenceError(f"connection refused during {operation}")

    async def verify(self, name: str, password: str) -> Optional[User]:
        self._check("verify")
        for id, user in self._users.items():
            if user.name == name and self._passwords[id] == password:
                return user
        return None

    async def list_all(self) -> list[User]:
        self._check("list_all")
        return [self._users[id] for id in sorted(self._users)]

    async def update_profile(
        self, user_id: UserId, name: str, profile_picture_url: str
    ) -> User:
        self._check("update_profile")
        if user_id.value not in self._users:
            raise EntityNotFoundError("User not found")
        if any(u.name == name and u.id != user_id for u in self._users.values()):
            raise PersistenceError("duplicate key value violates unique constraint")
        user = User(id=user_id, name=name, profile_picture_url=profile_picture_url)
        self._users[user_id.value] = user
        return user


class InMemoryMessageRepository(MessageRepository):
    BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __init__(self):
        self._messages: list[Message] = []
        self.fail = False

    def _check(self, operation: str) -> None:
        if self.fail:
            raise PersistenceError(f"connection refused during {operation}")

    def _newest_first(self, messages: list[Message]) -> list[Message]:
        return sorted(
            messages, key=lambda m: (m.created_at, m.id.value), reverse=True
        )

    async def add(self, message: NewMessage) -> Message:
        self._check("add")
        next_id = len(self._messages) + 1
        stored = Message(
            id=MessageId(next_id),
            body=message.body,
            user_id=message.user_id,
            channel=message.channel,
            created_at=self.BASE_TIME + timedelta(seconds=next_id),
            attachments=message.attachments,
            in_reply_to=message.in_reply_to,
        )
        self._messages.append(stored)
        return stored

    async def list_all(self) -> list[Message]:
        self._check("list_all")
        return self._newest_first(self._messages)

    async def list_by_channel(self, channel: str) -> list[Message]:
        self._check("list_by_channel")
        return self._newest_first([m for m in self._messages if m.channel == channel])

    async def list_channels(self) -> list[str]:
        self._check("list_channels")
        return sorted({m.channel for m in self._messages})


class InMemoryStoreProvider(Provider):
    def __init__(self, users: InMemoryUserStore, messages: InMemoryMessageRepository):
        super().__init__()
        self._users = users
        self._messages = messages

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._users

    @provide(scope=Scope.APP)
    def get_credential_store(self) -> CredentialStore:
        return self._users

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return self._messages


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def users():
    store = InMemoryUserStore()
    store.add_user(1, "alice", "secret123", "https://example.com/alice.png")
    store.add_user(2, "bob", "hunter2", "https://example.com/bob.png")
    return store


@pytest.fixture()
def messages():
    return InMemoryMessageRepository()


@pytest.fixture()
def container(clock, users, messages):
    return make_async_container(
        AppProvider(clock=clock), InMemoryStoreProvider(users, messages)
    )


@pytest.fixture()
def app(container):
    """Create a new FastAPI app instance for each test."""
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app, with lifespan running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def login(client):
    """Log in and return the bearer token."""

    def _login(name: str = "alice", password: str = "secret123") -> str:
        res = client.post("/auth/login", json={"name": name, "password": password})
        assert res.status_code == 200, res.text
        return res.json()["token"]

    return _login


@pytest.fixture()
def auth_headers(login):
    """Authentication headers for alice."""
    return {"Authorization": f"Bearer {login()}"}
