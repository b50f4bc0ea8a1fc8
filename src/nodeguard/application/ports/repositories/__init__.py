"""Repository ports."""

from nodeguard.application.ports.repositories.permission_repository import (
    PermissionRepository,
)

__all__ = [
    "PermissionRepository",
]
