"""Application ports - interfaces for external adapters."""

from nodeguard.application.ports.authorizer import (
    Authorizer,
    PermissionSnapshotSource,
)
from nodeguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Authorizer",
    "PermissionSnapshotSource",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
