"""Permission record entity - one stored policy statement."""

from dataclasses import dataclass

from nodeguard.domain.value_objects import Decision, Subject


@dataclass(frozen=True)
class PermissionRecord:
    """Subject is allowed or denied a node pattern, optionally within a scope.

    scope None means global. Records are never mutated in place; writers
    build a replacement with dataclasses.replace.
    """

    scope: str | None
    subject: Subject
    node: str
    decision: Decision
    id: int | None = None

    @property
    def key(self) -> tuple[str | None, Subject, str]:
        """Tuple writers use to find an existing record."""
        return (self.scope, self.subject, self.node)

    @property
    def allowed(self) -> bool:
        return self.decision.allowed
