"""
Delete Campsite Use Cases
=========================

Admin-only deletes. Comments are embedded, so they go with their campsite.
"""
import logging
from typing import Optional

from campsite_api.application.use_cases.authorize import authorize
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository, DeletionReport

logger = logging.getLogger(__name__)


class DeleteCampsiteUseCase:
    """Use case for deleting one campsite."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(self, campsite_id: str, principal: Optional[Principal]) -> DeletionReport:
        """
        Delete a campsite. A missing id is not an error: the report simply
        says nothing was removed.
        """
        authorize(
            Operation.DELETE_CAMPSITE,
            AuthorizationContext(principal=principal, campsite_id=campsite_id),
        )
        report = self._repository.delete_by_id(campsite_id)
        logger.info(f"Campsite {campsite_id} delete by {principal.user_id}: {report.deleted_count} removed")
        return report


class DeleteAllCampsitesUseCase:
    """Use case for deleting every campsite."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(self, principal: Optional[Principal]) -> DeletionReport:
        authorize(Operation.DELETE_ALL_CAMPSITES, AuthorizationContext(principal=principal))
        report = self._repository.delete_all()
        logger.warning(f"All campsites deleted by {principal.user_id}: {report.deleted_count} removed")
        return report
