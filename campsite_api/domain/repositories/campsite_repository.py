"""
Campsite Repository Interface
=============================

Abstract interface for campsite data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from campsite_api.domain.models.campsite import Campsite


@dataclass(frozen=True)
class DeletionReport:
    """What a delete actually removed."""
    acknowledged: bool
    deleted_count: int


class CampsiteRepository(ABC):
    """
    Abstract repository for campsite persistence operations.

    Comments are embedded in the campsite document, so every write here is a
    single-document write and deleting a campsite removes its comments with it.
    """

    @abstractmethod
    def create(self, campsite: Campsite) -> Campsite:
        """
        Create a new campsite.

        Args:
            campsite: Campsite entity to create

        Returns:
            Created campsite entity
        """
        pass

    @abstractmethod
    def save(self, campsite: Campsite) -> Campsite:
        """
        Atomically replace the stored campsite with the in-memory aggregate.

        The write only succeeds if the stored version still equals
        ``campsite.version``; the version is then incremented.

        Args:
            campsite: Mutated campsite aggregate

        Returns:
            Saved campsite entity (with the new version)

        Raises:
            ConcurrentModificationError: If the stored version moved on
        """
        pass

    @abstractmethod
    def find_by_id(self, campsite_id: str) -> Optional[Campsite]:
        """
        Find a campsite by its ID.

        Args:
            campsite_id: Unique campsite identifier

        Returns:
            Campsite entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Campsite]:
        """
        Find all campsites.

        Returns:
            List of campsite entities in insertion order
        """
        pass

    @abstractmethod
    def delete_by_id(self, campsite_id: str) -> DeletionReport:
        """
        Delete a campsite (and its comments).

        Args:
            campsite_id: Unique campsite identifier

        Returns:
            Deletion report (deleted_count is 0 when nothing matched)
        """
        pass

    @abstractmethod
    def delete_all(self) -> DeletionReport:
        """
        Delete every campsite.

        Returns:
            Deletion report
        """
        pass
