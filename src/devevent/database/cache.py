"""Process-wide connection cache.

Every request handler calls ``acquire_connection()`` before touching the
store. The first caller starts the connect operation; callers that arrive
while it is in flight await the same attempt instead of opening their own,
so a burst of concurrent requests at startup opens exactly one engine.

State is one of:

* ``UNCONNECTED``: no handle, no pending attempt
* ``CONNECTING``: a pending attempt, no handle
* ``CONNECTED``: a handle, no pending attempt

A failed attempt clears the pending marker and the error reaches every
waiter; the next call retries from scratch.
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum

import structlog

from devevent.config import Settings, get_settings
from devevent.database.engine import Database, open_database
from devevent.exceptions import ConfigurationException

logger = structlog.get_logger(__name__)

ConnectFn = Callable[[Settings], Awaitable[Database]]


class ConnectionState(str, Enum):
    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ConnectionCache:
    """Single-flight guard around one shared Database handle."""

    def __init__(
        self,
        connect: ConnectFn = open_database,
        settings_factory: Callable[[], Settings] = get_settings,
    ):
        self._connect = connect
        self._settings_factory = settings_factory
        self._handle: Database | None = None
        self._pending: asyncio.Task[Database] | None = None

    @property
    def state(self) -> ConnectionState:
        if self._handle is not None:
            return ConnectionState.CONNECTED
        if self._pending is not None:
            return ConnectionState.CONNECTING
        return ConnectionState.UNCONNECTED

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    async def acquire(self) -> Database:
        """Return the shared handle, connecting on first use.

        Raises:
            ConfigurationException: DATABASE_URL is not set
            DatabaseConnectionException: The connect attempt failed
        """
        if self._handle is not None:
            return self._handle

        if self._pending is None:
            settings = self._settings_factory()
            if not settings.database_url.strip():
                raise ConfigurationException(
                    "Please define the DATABASE_URL environment variable inside .env"
                )
            # Installed before the first await so later callers join this attempt
            self._pending = asyncio.ensure_future(self._establish(settings))
        else:
            logger.debug("database_connect_joined")

        # Waiters may be cancelled; the attempt itself always runs to completion
        return await asyncio.shield(self._pending)

    async def _establish(self, settings: Settings) -> Database:
        logger.info("database_connecting")
        try:
            handle = await self._connect(settings)
        except BaseException:
            self._pending = None
            raise
        self._handle = handle
        self._pending = None
        return handle

    async def aclose(self) -> None:
        """Dispose the handle and return to UNCONNECTED.

        An attempt still in flight is allowed to finish first.
        """
        if self._pending is not None:
            await asyncio.wait([self._pending])
        handle, self._handle = self._handle, None
        if handle is not None:
            await handle.dispose()
            logger.info("database_disconnected")

    def reset(self) -> None:
        """Forget the handle and any pending attempt without disposing. Test hook."""
        self._handle = None
        self._pending = None


connection_cache = ConnectionCache()


async def acquire_connection() -> Database:
    """Acquire the process-wide database handle."""
    return await connection_cache.acquire()
