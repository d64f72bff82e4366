"""
Campsite Model
==============

Domain model representing a campsite and its embedded comments.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from bson import ObjectId

from campsite_api.domain.constants.campsite_fields import CampsiteFields
from campsite_api.utils.datetime_utils import now


def new_id() -> str:
    """Generate a new opaque identifier (24-hex ObjectId string)."""
    return str(ObjectId())


def strip_reserved(payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop keys a client field bag is not allowed to set."""
    return {k: v for k, v in (payload or {}).items() if k not in CampsiteFields.RESERVED}


@dataclass
class Comment:
    """
    Comment embedded in a campsite.

    A comment only exists inside its parent's comment list and carries no
    reference back to it. ``author_id`` never changes after creation.
    ``extra`` holds stored keys this service does not interpret; they are
    written back unchanged.
    """
    id: str
    author_id: str
    text: str
    rating: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
    extra: Dict[str, Any] = field(default_factory=dict)

    def is_authored_by(self, user_id: Optional[str]) -> bool:
        """Check authorship by plain string equality."""
        return user_id is not None and str(self.author_id) == str(user_id)

    def update_text(self, new_text: Optional[str]) -> bool:
        """Overwrite text when a non-empty value is given. Returns True if changed."""
        if not new_text:
            return False
        self.text = new_text
        self.updated_at = now()
        return True


@dataclass
class Campsite:
    """
    Campsite aggregate.

    ``fields`` is an opaque key/value bag (name, description, image, cost, ...).
    ``comments`` keeps insertion order. ``version`` is bumped by the store on
    every successful save.
    """
    id: str
    fields: Dict[str, Any] = field(default_factory=dict)
    comments: List[Comment] = field(default_factory=list)
    version: int = 0
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> "Campsite":
        """Build a new campsite from a client field bag."""
        return cls(id=new_id(), fields=strip_reserved(payload))

    @property
    def name(self) -> Optional[str]:
        return self.fields.get(CampsiteFields.NAME)

    def merge_fields(self, payload: Optional[Dict[str, Any]]) -> None:
        """Shallow overwrite of the field bag (no deep merge)."""
        self.fields.update(strip_reserved(payload))
        self.updated_at = now()

    def index_of_comment(self, comment_id: str) -> Optional[int]:
        """Position of a comment in the list, by id equality."""
        for index, comment in enumerate(self.comments):
            if str(comment.id) == str(comment_id):
                return index
        return None

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        """Find a comment by its id."""
        index = self.index_of_comment(comment_id)
        return self.comments[index] if index is not None else None

    def add_comment(self, author_id: str, text: str, rating: Optional[int] = None) -> Comment:
        """Append a new comment authored by ``author_id``."""
        comment = Comment(id=new_id(), author_id=author_id, text=text, rating=rating)
        self.comments.append(comment)
        self.updated_at = now()
        return comment

    def remove_comment(self, comment_id: str) -> bool:
        """Remove a comment, keeping the order of the others."""
        index = self.index_of_comment(comment_id)
        if index is None:
            return False
        del self.comments[index]
        self.updated_at = now()
        return True

    def clear_comments(self) -> None:
        """Remove every comment."""
        self.comments = []
        self.updated_at = now()

    def author_ids(self) -> List[str]:
        """Distinct author ids, in first-seen order."""
        seen: Dict[str, None] = {}
        for comment in self.comments:
            seen.setdefault(str(comment.author_id), None)
        return list(seen)
