"""List permissions use case - records in a scope, with CSV export."""

import csv
import io

from nodeguard.application.ports import Authorizer
from nodeguard.application.use_cases.permission._access import (
    DEFAULT_MANAGE_NODE,
    ensure_can_manage,
)
from nodeguard.domain.entities import Actor, PermissionRecord

CSV_HEADER = ("Index", "type", "ID", "node", "allowed")


class ListPermissionsUseCase:
    """List stored records for a scope, ordered by subject id."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorizer: Authorizer,
        manage_node: str = DEFAULT_MANAGE_NODE,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer
        self._manage_node = manage_node

    async def execute(self, actor: Actor, scope: str | None) -> list[PermissionRecord]:
        ensure_can_manage(self._authorizer, actor, self._manage_node)
        async with self._uow_factory() as uow:
            records = await uow.permissions.list_by_scope(scope)
        return sorted(records, key=lambda r: r.subject.id)

    @staticmethod
    def to_csv(records: list[PermissionRecord]) -> str:
        """Render records as CSV rows: index, subject type, id, node, Yes/No."""
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for i, record in enumerate(records, start=1):
            writer.writerow(
                (
                    i,
                    record.subject.type,
                    record.subject.id,
                    record.node,
                    "Yes" if record.allowed else "No",
                )
            )
        return buf.getvalue()
