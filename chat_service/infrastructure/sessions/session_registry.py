"""
In-memory bearer session registry.

Tracks:
- Issued tokens and the user each one belongs to
- A fixed expiry per token (no sliding window)

Expired entries leave the table two ways: resolve() drops a token it finds
expired, and a background task calls sweep() on a fixed interval so tokens
that are never presented again do not accumulate. Sessions live only in this
process; a restart invalidates all of them.
"""

import asyncio
import logging
import secrets
import threading
import time
from typing import Callable, Optional

from chat_service.domain.entities.session import Session
from chat_service.domain.exceptions import SessionExpiredError, SessionNotFoundError
from chat_service.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class SessionRegistry:
    """
    Token table guarded by a single lock.

    The lock is only held for dictionary reads and writes, never across an
    await, so request handlers on the event loop are not stalled by a sweep.
    """

    def __init__(
        self,
        ttl_seconds: int,
        sweep_interval_seconds: float,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            ttl_seconds: Lifetime of every issued token
            sweep_interval_seconds: Delay between background sweeps
            clock: Returns the current time in epoch seconds
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if sweep_interval_seconds <= 0:
            raise ValueError("sweep_interval_seconds must be positive")
        self._ttl_ms = ttl_seconds * 1000
        self._sweep_interval = sweep_interval_seconds
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()
        self._sweeper: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def issue(self, user_id: UserId) -> Session:
        """
        Create a session for user_id.

        Returns:
            Session carrying the token and its absolute expiry (epoch ms)
        """
        session = Session(
            token=secrets.token_urlsafe(TOKEN_BYTES),
            user_id=user_id,
            expiry=self._now_ms() + self._ttl_ms,
        )
        with self._lock:
            self._sessions[session.token] = session
        logger.info(f"[Sessions] Issued token for user {user_id}")
        return session

    def resolve(self, token: str) -> UserId:
        """
        Look up the user behind a token.

        Raises:
            SessionNotFoundError: token unknown (never issued, or already removed)
            SessionExpiredError: token found expired; it is removed before raising
        """
        now_ms = self._now_ms()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                raise SessionNotFoundError()
            if session.is_expired(now_ms):
                del self._sessions[token]
                expired = True
            else:
                expired = False
        if expired:
            logger.info(f"[Sessions] Evicted expired token for user {session.user_id}")
            raise SessionExpiredError()
        return session.user_id

    def sweep(self) -> int:
        """
        Remove every session whose expiry has passed.

        Returns:
            Number of sessions removed
        """
        now_ms = self._now_ms()
        with self._lock:
            snapshot = list(self._sessions.items())

        expired = [
            (token, session)
            for token, session in snapshot
            if session.is_expired(now_ms)
        ]
        if not expired:
            return 0

        removed = 0
        with self._lock:
            for token, session in expired:
                # resolve() may have dropped it since the snapshot
                if self._sessions.get(token) is session:
                    del self._sessions[token]
                    removed += 1
        logger.info(f"[Sessions] Sweep removed {removed} expired session(s)")
        return removed

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            try:
                self.sweep()
            except Exception:
                logger.exception("[Sessions] Sweep failed")

    def start(self) -> None:
        """Schedule the periodic sweep on the running event loop."""
        if self._sweeper is not None and not self._sweeper.done():
            return
        self._sweeper = asyncio.get_running_loop().create_task(self._sweep_forever())
        logger.info(
            f"[Sessions] Sweeper started, interval {self._sweep_interval}s"
        )

    async def stop(self) -> None:
        """Cancel the periodic sweep and wait for it to finish."""
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None
        logger.info("[Sessions] Sweeper stopped")

    @property
    def sweeping(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()
