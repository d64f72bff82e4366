"""
Authorization decision and context types.
"""
from dataclasses import dataclass
from typing import Optional

from campsite_api.domain.exceptions import ErrorKind
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal


@dataclass(frozen=True)
class AuthorizationContext:
    """
    Everything a policy may look at.

    ``campsite`` is the loaded parent aggregate, or None when ``campsite_id``
    was not found. Comments are looked up through the parent.
    """
    principal: Optional[Principal] = None
    campsite_id: Optional[str] = None
    campsite: Optional[Campsite] = None
    comment_id: Optional[str] = None


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: ErrorKind, message: str) -> "Decision":
        return cls(allowed=False, reason=reason, message=message)
