"""Permission node validation for the write path."""

from nodeguard.domain.exceptions import ValidationError

MAX_NODE_LENGTH = 512
WILDCARD = "*"
SEPARATOR = "."


def validate_node(node: str) -> str:
    """Return stripped node, or raise ValidationError if empty or too long."""
    value = (node or "").strip()
    if not value:
        raise ValidationError("Permission node must not be empty")
    if len(value) > MAX_NODE_LENGTH:
        raise ValidationError(
            f"Permission node exceeds {MAX_NODE_LENGTH} characters"
        )
    return value
