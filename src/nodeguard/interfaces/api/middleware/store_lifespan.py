"""Store lifespan middleware - opens pool and loads permissions on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from nodeguard.infrastructure.permission.permission_store import PermissionStore

logger = logging.getLogger(__name__)


class StoreLifespanMiddleware:
    """Opens the pool and loads the permission snapshot; closes on shutdown."""

    def __init__(self, pool: AsyncConnectionPool, store: PermissionStore) -> None:
        self._pool = pool
        self._store = store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool and load permissions when ASGI server starts.

        A failed load does not abort startup; the service runs deny-by-default.
        """
        await self._pool.open()
        if not await self._store.refresh():
            logger.warning("Starting without permission records")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
