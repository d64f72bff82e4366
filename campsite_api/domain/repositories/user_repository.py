"""
User Repository Interface
=========================

Abstract interface for read-only user lookups.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from campsite_api.domain.models.user import User


class UserRepository(ABC):
    """Abstract repository interface for user lookups."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        pass

    @abstractmethod
    def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """Find several users at once, keyed by id. Unknown ids are left out."""
        pass
