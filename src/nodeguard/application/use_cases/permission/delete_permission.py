"""Delete permission use case."""

import logging

from nodeguard.application.ports import Authorizer, PermissionSnapshotSource
from nodeguard.application.use_cases.permission._access import (
    DEFAULT_MANAGE_NODE,
    ensure_can_manage,
)
from nodeguard.domain.entities import Actor
from nodeguard.domain.exceptions import NotFound
from nodeguard.domain.value_objects import Subject

logger = logging.getLogger(__name__)


class DeletePermissionUseCase:
    """Remove the record for (scope, subject, node), then reload."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorizer: Authorizer,
        snapshot_source: PermissionSnapshotSource,
        manage_node: str = DEFAULT_MANAGE_NODE,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer
        self._snapshot_source = snapshot_source
        self._manage_node = manage_node

    async def execute(
        self,
        actor: Actor,
        scope: str | None,
        subject: Subject,
        node: str,
    ) -> None:
        """Delete record. Actor must hold the manage node."""
        ensure_can_manage(self._authorizer, actor, self._manage_node)

        async with self._uow_factory() as uow:
            record = await uow.permissions.find_one(scope, subject, node)
            if not record:
                raise NotFound(
                    "Permission", f"{scope}/{subject.type}/{subject.id}/{node}"
                )
            await uow.permissions.delete(record.id)

        logger.info(
            "%s deleted %s %s on %s (scope=%s)",
            actor.user_id,
            subject.type,
            subject.id,
            node,
            scope,
        )
        await self._snapshot_source.refresh()
