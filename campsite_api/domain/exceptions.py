"""
Domain Exceptions
=================

Typed errors raised by the application layer. Each carries an ErrorKind
that the API layer maps to an HTTP status code.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Error taxonomy shared by the service and the transport layer."""
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"
    CONFLICT = "conflict"
    STORE_FAILURE = "store_failure"


class CampsiteApiError(Exception):
    """Base class for domain errors."""
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthenticatedError(CampsiteApiError):
    kind = ErrorKind.UNAUTHENTICATED


class ForbiddenError(CampsiteApiError):
    kind = ErrorKind.FORBIDDEN


class NotFoundError(CampsiteApiError):
    kind = ErrorKind.NOT_FOUND


class UnsupportedOperationError(CampsiteApiError):
    """A verb that is deliberately not implemented on a resource."""
    kind = ErrorKind.UNSUPPORTED

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"{method.upper()} operation not supported on {path}")
        self.method = method.upper()
        self.path = path


class ConcurrentModificationError(CampsiteApiError):
    """Raised when a save loses the optimistic version check."""
    kind = ErrorKind.CONFLICT

    def __init__(self, campsite_id: str, expected_version: int) -> None:
        super().__init__(
            f"Campsite {campsite_id} was modified concurrently (expected version {expected_version})"
        )
        self.campsite_id = campsite_id
        self.expected_version = expected_version
