"""Permission node matching - exact and wildcard comparison."""

from nodeguard.domain.value_objects.permission_node import SEPARATOR, WILDCARD


def matches(requested: str, pattern: str, strict: bool) -> bool:
    """Check whether a stored pattern grants the requested node.

    Exact equality always matches. Wildcard comparison is attempted only
    when not strict and the pattern contains "*".
    """
    if pattern == requested:
        return True
    if strict or WILDCARD not in pattern:
        return False
    return is_wildcard_match(requested, pattern)


def is_wildcard_match(requested: str, pattern: str) -> bool:
    """Compare segment by segment over the pattern's segments only.

    A shorter pattern matches any deeper requested node ("admin.*" matches
    "admin.kick.member"). A requested node shorter than the pattern only
    matches when every missing position is "*" in the pattern.
    """
    requested_parts = requested.split(SEPARATOR)
    pattern_parts = pattern.split(SEPARATOR)

    for i, part in enumerate(pattern_parts):
        if part == WILDCARD:
            continue
        if i < len(requested_parts) and requested_parts[i] == part:
            continue
        return False

    return True
