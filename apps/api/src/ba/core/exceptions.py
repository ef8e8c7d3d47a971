"""Domain exceptions raised by the service layer.

Each one maps to a single HTTP status in ``ba.main``.
"""


class AccessControlException(Exception):
    """Base exception for the access-control services."""

    default_message = "Request could not be completed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PermissionException(AccessControlException):
    """The requester may not perform this action (403)."""

    default_message = "User does not have the right to perform this action"


class NotFoundException(AccessControlException):
    """The container, user or membership does not exist (404)."""

    default_message = "Object not found"


class ConflictException(AccessControlException):
    """The write collides with an existing record (409)."""

    default_message = "Resource already exists"


class InvalidStateError(AccessControlException):
    """The record cannot move into the requested state (409)."""

    default_message = "Invalid state transition"
