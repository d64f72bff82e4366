"""
Authorization helpers for use cases.

Turns a denying Decision into the matching typed exception.
"""
from typing import Dict, Type

from campsite_api.domain.authorization import AuthorizationContext, Decision, Operation, decide
from campsite_api.domain.exceptions import (
    CampsiteApiError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
)

_DENIAL_ERRORS: Dict[ErrorKind, Type[CampsiteApiError]] = {
    ErrorKind.UNAUTHENTICATED: UnauthenticatedError,
    ErrorKind.FORBIDDEN: ForbiddenError,
    ErrorKind.NOT_FOUND: NotFoundError,
}


def raise_for_denial(decision: Decision) -> None:
    """Raise the typed error for a denied decision; no-op when allowed."""
    if decision.allowed:
        return
    raise _DENIAL_ERRORS[decision.reason](decision.message)


def authorize(operation: Operation, context: AuthorizationContext) -> None:
    """Decide and raise on denial."""
    raise_for_denial(decide(operation, context))
