from typing import TYPE_CHECKING
from ...domain.repositories.campsite_repository import CampsiteRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.services.campsite_service import CampsiteService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CampsiteProvider:
    """Campsite service provider - registers campsite-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register campsite service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            CampsiteService,
            CampsiteService(
                campsite_repository=container.get(CampsiteRepository),
                user_repository=container.get(UserRepository),
            )
        )
