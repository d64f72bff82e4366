"""
Create Campsite Use Case
========================

Admin-only creation of a campsite from a client field bag.
"""
import logging
from typing import Any, Dict, Optional

from campsite_api.application.use_cases.authorize import authorize
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository

logger = logging.getLogger(__name__)


class CreateCampsiteUseCase:
    """Use case for creating a campsite."""

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def execute(self, payload: Dict[str, Any], principal: Optional[Principal]) -> Campsite:
        """
        Execute the create campsite use case.

        Args:
            payload: Field bag (name, description, ...). Reserved keys such as
                ``comments`` or ``id`` are ignored.
            principal: Authenticated caller; must be an admin

        Returns:
            Created campsite entity

        Raises:
            UnauthenticatedError: If there is no principal
            ForbiddenError: If the principal is not an admin
        """
        authorize(Operation.CREATE_CAMPSITE, AuthorizationContext(principal=principal))

        campsite = self._repository.create(Campsite.from_payload(payload))
        logger.info(f"Campsite {campsite.id} created by {principal.user_id}")
        return campsite
