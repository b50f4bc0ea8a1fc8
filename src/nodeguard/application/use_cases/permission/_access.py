"""Shared manage-permission guard for permission use cases."""

from nodeguard.application.ports import Authorizer
from nodeguard.domain.entities import Actor
from nodeguard.domain.exceptions import PermissionDenied

DEFAULT_MANAGE_NODE = "permissions.manage"


def ensure_can_manage(authorizer: Authorizer, actor: Actor, manage_node: str) -> None:
    """Raise PermissionDenied unless actor holds the manage node (strict)."""
    if not authorizer.is_authorized(manage_node, actor, strict=True):
        raise PermissionDenied("User is not allowed to manage permissions")
