"""Permission repository port."""

from typing import Protocol

from nodeguard.domain.entities import PermissionRecord
from nodeguard.domain.value_objects import Subject


class PermissionRepository(Protocol):
    """Port for permission record persistence."""

    async def find_all(self) -> list[PermissionRecord]:
        """All records in insertion order."""
        ...

    async def list_by_scope(self, scope: str | None) -> list[PermissionRecord]: ...

    async def find_one(
        self, scope: str | None, subject: Subject, node: str
    ) -> PermissionRecord | None: ...

    async def create(self, record: PermissionRecord) -> PermissionRecord: ...

    async def update(self, record: PermissionRecord) -> None: ...

    async def delete(self, record_id: int) -> None: ...
