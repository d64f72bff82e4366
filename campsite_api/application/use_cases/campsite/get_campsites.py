"""
Get Campsites Use Cases
=======================

Public reads: list every campsite, or fetch one by id, with comment
authors resolved.
"""
from typing import List

from campsite_api.application.services.author_resolver import AuthorResolver
from campsite_api.application.use_cases.authorize import authorize
from campsite_api.application.views import CampsiteView
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.exceptions import NotFoundError
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository


class ListCampsitesUseCase:
    """Use case for listing all campsites."""

    def __init__(self, campsite_repository: CampsiteRepository, author_resolver: AuthorResolver):
        self._repository = campsite_repository
        self._authors = author_resolver

    def execute(self) -> List[CampsiteView]:
        authorize(Operation.LIST_CAMPSITES, AuthorizationContext())
        campsites = self._repository.find_all()
        authors = self._authors.resolve(campsites)
        return [CampsiteView(campsite=c, authors=authors) for c in campsites]


class GetCampsiteUseCase:
    """Use case for fetching one campsite."""

    def __init__(self, campsite_repository: CampsiteRepository, author_resolver: AuthorResolver):
        self._repository = campsite_repository
        self._authors = author_resolver

    def execute(self, campsite_id: str) -> CampsiteView:
        """
        Raises:
            NotFoundError: If the campsite does not exist
        """
        campsite = self._repository.find_by_id(campsite_id)
        authorize(
            Operation.GET_CAMPSITE,
            AuthorizationContext(campsite_id=campsite_id, campsite=campsite),
        )
        # Reads are never denied; absence is still a 404
        if campsite is None:
            raise NotFoundError(f"Campsite {campsite_id} not found")
        return CampsiteView(campsite=campsite, authors=self._authors.resolve([campsite]))
