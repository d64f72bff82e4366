"""
Replace Campsite Fields Use Case
================================

Admin-only shallow overwrite of a campsite's field bag.
"""
import logging
from typing import Any, Dict, Optional

from campsite_api.application.use_cases.authorize import authorize
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository

logger = logging.getLogger(__name__)


class ReplaceCampsiteFieldsUseCase:
    """Use case for overwriting campsite fields."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(self, campsite_id: str, payload: Dict[str, Any], principal: Optional[Principal]) -> Campsite:
        """
        Merge ``payload`` into the campsite's fields (top-level keys replace,
        nothing is merged deeply) and persist.

        Raises:
            ForbiddenError: If the principal is not an admin
            NotFoundError: If the campsite does not exist
            ConcurrentModificationError: If another write landed first
        """
        campsite = self._repository.find_by_id(campsite_id)
        authorize(
            Operation.REPLACE_CAMPSITE,
            AuthorizationContext(principal=principal, campsite_id=campsite_id, campsite=campsite),
        )

        campsite.merge_fields(payload)
        saved = self._repository.save(campsite)
        logger.info(f"Campsite {campsite_id} fields replaced by {principal.user_id}")
        return saved
