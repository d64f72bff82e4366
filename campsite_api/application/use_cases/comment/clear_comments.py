"""
Clear Comments Use Case
=======================

Admin-only removal of every comment on a campsite, regardless of author.
"""
import logging
from typing import Optional

from campsite_api.application.use_cases.authorize import authorize
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository

logger = logging.getLogger(__name__)


class ClearCommentsUseCase:
    """Use case for emptying a campsite's comment list."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(self, campsite_id: str, principal: Optional[Principal]) -> Campsite:
        """
        Raises:
            ForbiddenError: If the principal is not an admin (checked before existence)
            NotFoundError: If the campsite does not exist
        """
        campsite = self._repository.find_by_id(campsite_id)
        authorize(
            Operation.CLEAR_COMMENTS,
            AuthorizationContext(principal=principal, campsite_id=campsite_id, campsite=campsite),
        )

        removed = len(campsite.comments)
        campsite.clear_comments()
        saved = self._repository.save(campsite)
        logger.info(f"Campsite {campsite_id}: {removed} comments cleared by {principal.user_id}")
        return saved
