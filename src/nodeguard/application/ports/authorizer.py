"""Authorization ports - decision queries and snapshot refresh."""

from typing import Protocol

from nodeguard.domain.entities import Actor


class Authorizer(Protocol):
    """Port for deciding whether an actor may use a permission node."""

    def is_authorized(
        self, node: str | None, actor: Actor | None, strict: bool = False
    ) -> bool: ...


class PermissionSnapshotSource(Protocol):
    """Port for reloading the records an Authorizer reads."""

    async def refresh(self) -> bool: ...
