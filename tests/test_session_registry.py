import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from chat_service.domain.exceptions import SessionExpiredError, SessionNotFoundError
from chat_service.domain.value_objects.user_id import UserId
from chat_service.infrastructure.sessions.session_registry import SessionRegistry
from tests.conftest import FakeClock, START_TIME

TTL = 3600


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def registry(clock):
    return SessionRegistry(ttl_seconds=TTL, sweep_interval_seconds=600, clock=clock)


def test_issue_returns_long_unique_tokens_with_absolute_expiry(registry):
    sessions = [registry.issue(UserId(1)) for _ in range(200)]

    assert len({s.token for s in sessions}) == 200
    assert all(len(s.token) >= 36 for s in sessions)
    assert all(s.expiry == int(START_TIME * 1000) + TTL * 1000 for s in sessions)
    assert len(registry) == 200


def test_resolve_returns_user_until_expiry(registry, clock):
    session = registry.issue(UserId(7))

    clock.advance(TTL - 0.001)
    assert registry.resolve(session.token) == UserId(7)


def test_resolve_at_expiry_evicts_then_reports_unknown(registry, clock):
    session = registry.issue(UserId(7))
    clock.advance(TTL)

    with pytest.raises(SessionExpiredError):
        registry.resolve(session.token)
    assert len(registry) == 0
    with pytest.raises(SessionNotFoundError):
        registry.resolve(session.token)


def test_resolve_does_not_extend_expiry(registry, clock):
    session = registry.issue(UserId(7))

    clock.advance(TTL - 1)
    registry.resolve(session.token)
    clock.advance(1)

    with pytest.raises(SessionExpiredError):
        registry.resolve(session.token)


def test_resolve_unknown_token(registry):
    with pytest.raises(SessionNotFoundError):
        registry.resolve("not-a-real-token")


def test_user_may_hold_several_sessions(registry, clock):
    first = registry.issue(UserId(1))
    clock.advance(TTL / 2)
    second = registry.issue(UserId(1))
    clock.advance(TTL / 2)

    with pytest.raises(SessionExpiredError):
        registry.resolve(first.token)
    assert registry.resolve(second.token) == UserId(1)


def test_sweep_removes_only_expired_entries(registry, clock):
    old = [registry.issue(UserId(1)) for _ in range(3)]
    clock.advance(TTL / 2)
    fresh = [registry.issue(UserId(2)) for _ in range(2)]
    clock.advance(TTL / 2)

    assert registry.sweep() == 3
    assert len(registry) == 2
    for session in old:
        with pytest.raises(SessionNotFoundError):
            registry.resolve(session.token)
    for session in fresh:
        assert registry.resolve(session.token) == UserId(2)


def test_sweep_with_nothing_expired(registry):
    registry.issue(UserId(1))
    assert registry.sweep() == 0
    assert len(registry) == 1


def test_concurrent_resolve_of_expired_token_reports_expiry_once(registry, clock):
    session = registry.issue(UserId(3))
    clock.advance(TTL)
    workers = 16
    barrier = threading.Barrier(workers)

    def attempt():
        barrier.wait()
        try:
            registry.resolve(session.token)
        except SessionExpiredError:
            return "expired"
        except SessionNotFoundError:
            return "not_found"
        return "active"

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda _: attempt(), range(workers)))

    assert results.count("expired") == 1
    assert results.count("not_found") == workers - 1
    assert len(registry) == 0


def test_concurrent_issue_keeps_every_entry(registry):
    with ThreadPoolExecutor(max_workers=8) as pool:
        sessions = list(pool.map(lambda i: registry.issue(UserId(i + 1)), range(400)))

    assert len(registry) == 400
    for i, session in enumerate(sessions):
        assert registry.resolve(session.token) == UserId(i + 1)


@pytest.mark.parametrize(
    "ttl, interval",
    [(0, 600), (-1, 600), (3600, 0)],
)
def test_rejects_non_positive_durations(ttl, interval):
    with pytest.raises(ValueError):
        SessionRegistry(ttl_seconds=ttl, sweep_interval_seconds=interval)


@pytest.mark.asyncio
async def test_background_sweeper_removes_abandoned_tokens(clock):
    registry = SessionRegistry(ttl_seconds=TTL, sweep_interval_seconds=0.01, clock=clock)
    registry.issue(UserId(1))
    clock.advance(TTL)

    registry.start()
    assert registry.sweeping
    for _ in range(100):
        if len(registry) == 0:
            break
        await asyncio.sleep(0.01)
    await registry.stop()

    assert len(registry) == 0
    assert not registry.sweeping


@pytest.mark.asyncio
async def test_start_is_idempotent_and_stop_without_start_is_noop(clock):
    registry = SessionRegistry(ttl_seconds=TTL, sweep_interval_seconds=600, clock=clock)
    await registry.stop()

    registry.start()
    task = registry._sweeper
    registry.start()
    assert registry._sweeper is task

    await registry.stop()
    assert task.cancelled()
