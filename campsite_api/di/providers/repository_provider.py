from typing import TYPE_CHECKING
from ...domain.repositories.campsite_repository import CampsiteRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_campsite_repository import MongoCampsiteRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            CampsiteRepository,
            MongoCampsiteRepository(client=mongo_client)
        )

        container.register_singleton(
            UserRepository,
            MongoUserRepository(client=mongo_client)
        )
