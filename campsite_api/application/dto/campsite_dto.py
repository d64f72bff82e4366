"""
Campsite DTO
============

Pydantic models for campsite API responses. Campsite bodies are free-form
field bags, so requests are taken as plain dicts by the controllers.
"""
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from campsite_api.application.dto.comment_dto import CommentResponse
from campsite_api.application.views import CampsiteView
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.user import User
from campsite_api.domain.repositories.campsite_repository import DeletionReport


class CampsiteResponse(BaseModel):
    """
    DTO for campsite data.

    The campsite's own fields (name, description, ...) appear next to the
    fixed keys below.
    """
    id: str
    comments: List[CommentResponse]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "65a1c2e4f0a1b2c3d4e5f601",
                "name": "React Lake Campground",
                "description": "Nestled in the foothills of the Chrome Mountains.",
                "elevation": 1233,
                "featured": False,
                "comments": [],
                "created_at": "2026-06-01T09:11:50.840Z",
                "updated_at": "2026-06-01T09:11:50.840Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, campsite: Campsite, authors: Optional[Dict[str, User]] = None) -> "CampsiteResponse":
        return cls(
            **campsite.fields,
            id=campsite.id,
            comments=[CommentResponse.from_entity(c, authors) for c in campsite.comments],
            created_at=campsite.created_at,
            updated_at=campsite.updated_at,
        )

    @classmethod
    def from_view(cls, view: CampsiteView) -> "CampsiteResponse":
        return cls.from_entity(view.campsite, view.authors)


class DeletionReportResponse(BaseModel):
    """DTO for delete results; deleted_count is 0 when nothing matched."""
    acknowledged: bool
    deleted_count: int

    @classmethod
    def from_report(cls, report: DeletionReport) -> "DeletionReportResponse":
        return cls(acknowledged=report.acknowledged, deleted_count=report.deleted_count)


class ErrorResponse(BaseModel):
    """DTO for error bodies produced by the exception handlers."""
    detail: str
    error: str
