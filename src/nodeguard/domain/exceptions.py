"""Domain exceptions."""


class NodeGuardError(Exception):
    """Base exception for NodeGuard."""

    pass


class LoadError(NodeGuardError):
    """Permission records could not be loaded from persistence."""

    pass


class PermissionDenied(NodeGuardError):
    """Actor does not have permission for the requested action."""

    pass


class NotFound(NodeGuardError):
    """Requested resource was not found."""

    pass


class ValidationError(NodeGuardError):
    """Validation failed for input data."""

    pass
