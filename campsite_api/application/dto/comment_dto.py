"""
Comment DTO
===========

Pydantic models for comment API requests and responses.
"""
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from campsite_api.application.views import CommentsView
from campsite_api.domain.models.campsite import Comment
from campsite_api.domain.models.user import User


class CommentCreateRequest(BaseModel):
    """DTO for adding a comment. The author is always the caller."""
    text: str = Field(..., min_length=1, description="Comment text")
    rating: Optional[int] = Field(None, description="Optional rating")

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "Great views at sunrise.", "rating": 5}}
    )


class CommentUpdateRequest(BaseModel):
    """DTO for editing a comment. Only ``text`` can change; empty text is a no-op."""
    text: Optional[str] = Field(None, description="New comment text")


class AuthorResponse(BaseModel):
    """Public part of a user record, attached to comments on reads."""
    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    admin: bool = False

    @classmethod
    def from_entity(cls, user: User) -> "AuthorResponse":
        return cls(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            admin=user.admin,
        )


class CommentResponse(BaseModel):
    """DTO for comment data. ``author`` is only filled on reads."""
    id: str
    author_id: str
    author: Optional[AuthorResponse] = None
    text: str
    rating: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment, authors: Optional[Dict[str, User]] = None) -> "CommentResponse":
        author = (authors or {}).get(str(comment.author_id))
        return cls(
            id=comment.id,
            author_id=comment.author_id,
            author=AuthorResponse.from_entity(author) if author else None,
            text=comment.text,
            rating=comment.rating,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


def comments_response(view: CommentsView) -> List[CommentResponse]:
    return [CommentResponse.from_entity(c, view.authors) for c in view.comments]


class CommentDeniedResponse(BaseModel):
    """Body returned when a non-author tries to edit or delete a comment."""
    error: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Forbidden: You can only edit your own comments"}}
    )
