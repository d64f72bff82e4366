"""
Author Resolver
===============

Read-time join of comment authors: one batched user lookup per response.
"""
from typing import Dict, Iterable, List

from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.user import User
from campsite_api.domain.repositories.user_repository import UserRepository


class AuthorResolver:
    """Resolves comment author ids to user records."""

    def __init__(self, user_repository: UserRepository):
        self._users = user_repository

    def resolve_ids(self, author_ids: Iterable[str]) -> Dict[str, User]:
        ids = list(dict.fromkeys(str(author_id) for author_id in author_ids))
        if not ids:
            return {}
        return self._users.find_by_ids(ids)

    def resolve(self, campsites: Iterable[Campsite]) -> Dict[str, User]:
        author_ids: List[str] = []
        for campsite in campsites:
            author_ids.extend(campsite.author_ids())
        return self.resolve_ids(author_ids)
