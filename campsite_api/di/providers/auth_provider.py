from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.auth.principal_resolver import PrincipalResolver
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.auth.jwt_principal_resolver import JwtConfig, JwtPrincipalResolver

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the principal resolver"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the JWT principal resolver.
        Users are looked up through the repository registered earlier.
        """
        container.register_singleton(
            PrincipalResolver,
            JwtPrincipalResolver(
                config=JwtConfig.from_settings(get_settings()),
                user_repository=container.get(UserRepository),
            )
        )
