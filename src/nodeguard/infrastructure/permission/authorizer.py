"""Authorizer - decides permission node queries against the store snapshot."""

import logging
from collections.abc import Callable, Iterable

from nodeguard.domain.entities import Actor, PermissionRecord
from nodeguard.domain.value_objects import Decision, RoleSubject, UserSubject
from nodeguard.infrastructure.permission.node_matcher import matches
from nodeguard.infrastructure.permission.permission_store import PermissionStore

logger = logging.getLogger(__name__)


class NodeGuardAuthorizer:
    """Default deny, explicit allow, deny overrides.

    Each role the actor holds, then the actor as a user, contributes the
    decision of its first matching record in snapshot order. Any deny ends
    evaluation; otherwise at least one allow is needed.
    """

    def __init__(
        self,
        store: PermissionStore,
        backdoor_ids: Iterable[str] = (),
        owner_id: str | None = None,
    ) -> None:
        self._store = store
        overrides = set(backdoor_ids)
        if owner_id:
            overrides.add(owner_id)
        self._overrides = frozenset(overrides)

    def is_authorized(
        self, node: str | None, actor: Actor | None, strict: bool = False
    ) -> bool:
        """Check if actor may use node. Never raises, never does I/O."""
        if not node:
            return True
        if actor is None:
            return False
        if actor.user_id in self._overrides:
            return True

        snapshot = self._store.snapshot()
        has_permission = False

        for role_id in actor.role_ids:
            subject = RoleSubject(role_id)
            decision = _first_match(
                snapshot, node, strict, lambda r: r.subject == subject
            )
            if decision is Decision.DENY:
                logger.debug("Role %s denies %s to %s", role_id, node, actor.user_id)
                return False
            if decision is Decision.ALLOW:
                has_permission = True

        user = UserSubject(actor.user_id)
        decision = _first_match(
            snapshot,
            node,
            strict,
            lambda r: r.subject == user and r.scope == actor.scope,
        )
        if decision is Decision.DENY:
            logger.debug("User record denies %s to %s", node, actor.user_id)
            return False
        if decision is Decision.ALLOW:
            has_permission = True

        return has_permission


def _first_match(
    snapshot: tuple[PermissionRecord, ...],
    node: str,
    strict: bool,
    applies: Callable[[PermissionRecord], bool],
) -> Decision | None:
    """Decision of the first applicable record matching node, else None."""
    for record in snapshot:
        if applies(record) and matches(node, record.node, strict):
            return record.decision
    return None
