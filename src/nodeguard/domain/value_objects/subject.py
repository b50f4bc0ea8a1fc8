"""Permission subject - the role or user a record applies to."""

from dataclasses import dataclass
from enum import StrEnum


class SubjectType(StrEnum):
    """Kinds of subject a permission record can target."""

    ROLE = "role"
    USER = "user"


@dataclass(frozen=True)
class RoleSubject:
    """Record applies to every holder of a role."""

    id: str

    @property
    def type(self) -> SubjectType:
        return SubjectType.ROLE


@dataclass(frozen=True)
class UserSubject:
    """Record applies to a single user."""

    id: str

    @property
    def type(self) -> SubjectType:
        return SubjectType.USER


Subject = RoleSubject | UserSubject


def make_subject(subject_type: str, subject_id: str) -> Subject:
    """Build subject variant from stored (type, id) pair."""
    kind = SubjectType(subject_type)
    if kind is SubjectType.ROLE:
        return RoleSubject(subject_id)
    return UserSubject(subject_id)
