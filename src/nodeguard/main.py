"""Application entry point and composition root."""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from nodeguard import __version__
from nodeguard.application.use_cases.permission.delete_permission import (
    DeletePermissionUseCase,
)
from nodeguard.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from nodeguard.application.use_cases.permission.set_permission import (
    SetPermissionUseCase,
)
from nodeguard.config import Settings, get_settings
from nodeguard.domain.entities import Actor
from nodeguard.infrastructure.permission.authorizer import NodeGuardAuthorizer
from nodeguard.infrastructure.permission.permission_store import PermissionStore
from nodeguard.infrastructure.persistence.postgres.connection import create_pool
from nodeguard.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from nodeguard.interfaces.api.app import create_app
from nodeguard.interfaces.api.middleware.store_lifespan import StoreLifespanMiddleware
from nodeguard.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """Wired authorization engine and its permission use cases."""

    pool: AsyncConnectionPool
    store: PermissionStore
    authorizer: NodeGuardAuthorizer
    set_permission: SetPermissionUseCase
    delete_permission: DeletePermissionUseCase
    list_permissions: ListPermissionsUseCase


def configure_logging(level: str) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_engine(settings: Settings) -> Engine:
    """Composition root - wire store, authorizer and use cases."""
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    store = PermissionStore(
        uow_factory, load_timeout=settings.permission_load_timeout
    )
    authorizer = NodeGuardAuthorizer(
        store,
        backdoor_ids=settings.backdoor_id_set,
        owner_id=settings.owner_id,
    )
    return Engine(
        pool=pool,
        store=store,
        authorizer=authorizer,
        set_permission=SetPermissionUseCase(
            unit_of_work_factory=uow_factory,
            authorizer=authorizer,
            snapshot_source=store,
            manage_node=settings.manage_node,
        ),
        delete_permission=DeletePermissionUseCase(
            unit_of_work_factory=uow_factory,
            authorizer=authorizer,
            snapshot_source=store,
            manage_node=settings.manage_node,
        ),
        list_permissions=ListPermissionsUseCase(
            unit_of_work_factory=uow_factory,
            authorizer=authorizer,
            manage_node=settings.manage_node,
        ),
    )


def create_nodeguard_app(engine: Engine | None = None):
    """Build Falcon app exposing health and readiness of the engine."""
    engine = engine or build_engine(get_settings())
    return create_app(
        HealthResource(engine.store),
        middleware=[StoreLifespanMiddleware(engine.pool, engine.store)],
    )


def build_actor(user_id: str, role_ids: list[str], scope: str | None) -> Actor:
    """Actor for a CLI query; scoped actors get the scope as implicit role."""
    if scope:
        return Actor.member(user_id, scope, role_ids)
    return Actor(user_id=user_id, role_ids=tuple(role_ids))


async def run_check(engine: Engine, node: str, actor: Actor, strict: bool) -> bool | None:
    """Load permissions and decide a single query. None if loading failed."""
    await engine.pool.open()
    try:
        if not await engine.store.refresh():
            return None
        return engine.authorizer.is_authorized(node, actor, strict)
    finally:
        await engine.pool.close()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nodeguard", description="Permission node authorization")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run health/readiness API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    check = sub.add_parser("check", help="Decide whether an actor may use a node")
    check.add_argument("node")
    check.add_argument("--user", required=True, help="User id")
    check.add_argument("--role", action="append", default=[], help="Role id (repeatable)")
    check.add_argument("--scope", default=None, help="Scope id; omit for direct context")
    check.add_argument("--strict", action="store_true", help="Disable wildcard matching")

    sub.add_parser("version", help="Print version")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    logger.debug("NodeGuard v%s, environment=%s", __version__, settings.environment)

    if args.command == "serve":
        import uvicorn

        uvicorn.run(create_nodeguard_app(build_engine(settings)), host=args.host, port=args.port)
        return 0

    if args.command == "check":
        actor = build_actor(args.user, args.role, args.scope)
        result = asyncio.run(run_check(build_engine(settings), args.node, actor, args.strict))
        if result is None:
            print("error: permission records could not be loaded", file=sys.stderr)
            return 2
        print("allowed" if result else "denied")
        return 0 if result else 1

    print(f"NodeGuard v{__version__}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
