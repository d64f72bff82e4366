"""
Add Comment Use Case
====================

Any authenticated user may comment on an existing campsite; the comment's
author is always the caller.
"""
import logging
from typing import Optional

from campsite_api.application.use_cases.authorize import authorize
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Use case for appending a comment."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(
        self,
        campsite_id: str,
        text: str,
        principal: Optional[Principal],
        rating: Optional[int] = None,
    ) -> Campsite:
        campsite = self._repository.find_by_id(campsite_id)
        authorize(
            Operation.ADD_COMMENT,
            AuthorizationContext(principal=principal, campsite_id=campsite_id, campsite=campsite),
        )

        comment = campsite.add_comment(author_id=principal.user_id, text=text, rating=rating)
        saved = self._repository.save(campsite)
        logger.info(f"Comment {comment.id} added to campsite {campsite_id} by {principal.user_id}")
        return saved
