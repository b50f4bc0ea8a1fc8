"""Decision carried by a permission record."""

from enum import StrEnum


class Decision(StrEnum):
    """Allow or deny."""

    ALLOW = "allow"
    DENY = "deny"

    @classmethod
    def from_allowed(cls, allowed: bool) -> "Decision":
        return cls.ALLOW if allowed else cls.DENY

    @property
    def allowed(self) -> bool:
        return self is Decision.ALLOW
