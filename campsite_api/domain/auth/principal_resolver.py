"""
Principal Resolver Interface
============================

Turns request credentials into an authenticated Principal.
"""
from abc import ABC, abstractmethod
from typing import Optional

from campsite_api.domain.models.principal import Principal


class PrincipalResolver(ABC):
    """Abstract resolver from a bearer credential to a Principal."""

    @abstractmethod
    def resolve(self, token: Optional[str]) -> Principal:
        """
        Resolve a bearer token.

        Args:
            token: Raw bearer token, or None when the request carried none

        Returns:
            Authenticated principal

        Raises:
            UnauthenticatedError: If the token is missing, invalid or unknown
        """
        pass
