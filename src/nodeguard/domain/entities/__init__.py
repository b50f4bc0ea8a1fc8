"""Domain entities."""

from nodeguard.domain.entities.actor import Actor
from nodeguard.domain.entities.permission_record import PermissionRecord

__all__ = [
    "Actor",
    "PermissionRecord",
]
