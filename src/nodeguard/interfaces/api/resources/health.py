"""Health check endpoints."""

import falcon.asgi

from nodeguard.infrastructure.permission.permission_store import PermissionStore


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, store: PermissionStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (permission snapshot loaded)."""
        if not self._store.loaded:
            resp.media = {"status": "degraded", "permissions_loaded": False}
            resp.status = falcon.HTTP_503
            return
        resp.media = {
            "status": "ready",
            "permissions_loaded": True,
            "permission_count": len(self._store.snapshot()),
            "loaded_at": self._store.loaded_at.isoformat(),
        }
        resp.status = falcon.HTTP_200
