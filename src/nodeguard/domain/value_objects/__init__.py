"""Domain value objects."""

from nodeguard.domain.value_objects.decision import Decision
from nodeguard.domain.value_objects.permission_node import (
    MAX_NODE_LENGTH,
    validate_node,
)
from nodeguard.domain.value_objects.subject import (
    RoleSubject,
    Subject,
    SubjectType,
    UserSubject,
    make_subject,
)

__all__ = [
    "Decision",
    "MAX_NODE_LENGTH",
    "RoleSubject",
    "Subject",
    "SubjectType",
    "UserSubject",
    "make_subject",
    "validate_node",
]
