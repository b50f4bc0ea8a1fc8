"""Actor - the subject of an authorization query."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """User, roles held, and the scope the query is evaluated in.

    Built per query by the caller, never persisted.
    """

    user_id: str
    role_ids: tuple[str, ...] = ()
    scope: str | None = None

    @classmethod
    def member(
        cls, user_id: str, scope: str, role_ids: Iterable[str] = ()
    ) -> "Actor":
        """Actor acting inside a scope.

        The scope's identifier is always evaluated as an implicit default
        role, appended after the explicit roles.
        """
        roles = tuple(role_ids)
        if scope not in roles:
            roles = roles + (scope,)
        return cls(user_id=user_id, role_ids=roles, scope=scope)

    @classmethod
    def direct(cls, user_id: str) -> "Actor":
        """Actor outside of any scope (e.g. a direct message)."""
        return cls(user_id=user_id)
