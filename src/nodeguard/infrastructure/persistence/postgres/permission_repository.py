"""PostgreSQL permission repository implementation."""

from dataclasses import replace

from psycopg import AsyncConnection

from nodeguard.domain.entities import PermissionRecord
from nodeguard.domain.value_objects import Decision, Subject, make_subject

_COLUMNS = "id, scope, subject_type, subject_id, node, allowed"


def _row_to_record(row: tuple) -> PermissionRecord:
    """Map a permission row to a record. Empty scope is treated as global."""
    return PermissionRecord(
        id=row[0],
        scope=row[1] or None,
        subject=make_subject(row[2], str(row[3])),
        node=row[4],
        decision=Decision.from_allowed(bool(row[5])),
    )


def _scope_condition(scope: str | None) -> tuple[str, tuple]:
    """WHERE fragment for a scope, matching NULL when scope is None."""
    if scope is None:
        return "scope IS NULL", ()
    return "scope = %s", (scope,)


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_all(self) -> list[PermissionRecord]:
        """All records in insertion order."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission ORDER BY id"
        )
        rows = await cur.fetchall()
        return [_row_to_record(r) for r in rows]

    async def list_by_scope(self, scope: str | None) -> list[PermissionRecord]:
        """List records stored for scope."""
        condition, params = _scope_condition(scope)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE {condition} ORDER BY id",
            params,
        )
        rows = await cur.fetchall()
        return [_row_to_record(r) for r in rows]

    async def find_one(
        self, scope: str | None, subject: Subject, node: str
    ) -> PermissionRecord | None:
        """Get first record for (scope, subject, node)."""
        condition, params = _scope_condition(scope)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission "
            f"WHERE {condition} AND subject_type = %s AND subject_id = %s AND node = %s "
            "ORDER BY id LIMIT 1",
            (*params, str(subject.type), subject.id, node),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_record(r)

    async def create(self, record: PermissionRecord) -> PermissionRecord:
        """Create record, returning it with its generated id."""
        cur = await self._conn.execute(
            "INSERT INTO permission (scope, subject_type, subject_id, node, allowed) "
            "VALUES (%s, %s, %s, %s, %s) RETURNING id",
            (
                record.scope,
                str(record.subject.type),
                record.subject.id,
                record.node,
                record.allowed,
            ),
        )
        r = await cur.fetchone()
        return replace(record, id=r[0])

    async def update(self, record: PermissionRecord) -> None:
        """Update record decision."""
        await self._conn.execute(
            "UPDATE permission SET allowed=%s WHERE id=%s",
            (record.allowed, record.id),
        )

    async def delete(self, record_id: int) -> None:
        """Delete record."""
        await self._conn.execute(
            "DELETE FROM permission WHERE id = %s",
            (record_id,),
        )
