"""
Read-side views
===============

Shapes returned by the service that are not persisted as such.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from campsite_api.domain.models.campsite import Campsite, Comment
from campsite_api.domain.models.user import User


@dataclass
class CampsiteView:
    """A campsite plus the users who wrote its comments (read-time join)."""
    campsite: Campsite
    authors: Dict[str, User] = field(default_factory=dict)


@dataclass
class CommentsView:
    """The comments of one campsite plus their authors."""
    campsite_id: str
    comments: List[Comment]
    authors: Dict[str, User] = field(default_factory=dict)


@dataclass
class CommentMutationOutcome:
    """
    Result of an owner-only comment edit or delete.

    Exactly one of ``campsite`` and ``denied_message`` is set. A denial is a
    normal outcome here, not an exception.
    """
    campsite: Optional[Campsite] = None
    denied_message: Optional[str] = None

    @property
    def denied(self) -> bool:
        return self.denied_message is not None

    @classmethod
    def saved(cls, campsite: Campsite) -> "CommentMutationOutcome":
        return cls(campsite=campsite)

    @classmethod
    def deny(cls, message: str) -> "CommentMutationOutcome":
        return cls(denied_message=message)
