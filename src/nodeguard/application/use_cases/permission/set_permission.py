"""Set permission use case - grant or revoke a node for a role or user."""

import logging
from dataclasses import replace

from nodeguard.application.ports import Authorizer, PermissionSnapshotSource
from nodeguard.application.use_cases.permission._access import (
    DEFAULT_MANAGE_NODE,
    ensure_can_manage,
)
from nodeguard.domain.entities import Actor, PermissionRecord
from nodeguard.domain.value_objects import Decision, Subject, validate_node

logger = logging.getLogger(__name__)


class SetPermissionUseCase:
    """Create or update the record for (scope, subject, node), then reload."""

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
        decision: Decision,
    ) -> PermissionRecord:
        """Store decision for subject on node. Actor must hold the manage node."""
        ensure_can_manage(self._authorizer, actor, self._manage_node)
        node = validate_node(node)

        async with self._uow_factory() as uow:
            existing = await uow.permissions.find_one(scope, subject, node)
            if existing:
                record = replace(existing, decision=decision)
                await uow.permissions.update(record)
            else:
                record = await uow.permissions.create(
                    PermissionRecord(
                        scope=scope,
                        subject=subject,
                        node=node,
                        decision=decision,
                    )
                )

        logger.info(
            "%s set %s %s on %s to %s (scope=%s)",
            actor.user_id,
            subject.type,
            subject.id,
            node,
            decision,
            scope,
        )
        await self._snapshot_source.refresh()
        return record

    async def grant(
        self, actor: Actor, scope: str | None, subject: Subject, node: str
    ) -> PermissionRecord:
        return await self.execute(actor, scope, subject, node, Decision.ALLOW)

    async def revoke(
        self, actor: Actor, scope: str | None, subject: Subject, node: str
    ) -> PermissionRecord:
        return await self.execute(actor, scope, subject, node, Decision.DENY)
