"""
Campsite Service
================

Application service that coordinates campsite and comment operations.
This service orchestrates the individual use cases.
"""
from typing import Any, Dict, List, Optional

from campsite_api.application.services.author_resolver import AuthorResolver
from campsite_api.application.use_cases.campsite.create_campsite import CreateCampsiteUseCase
from campsite_api.application.use_cases.campsite.delete_campsites import (
    DeleteAllCampsitesUseCase,
    DeleteCampsiteUseCase,
)
from campsite_api.application.use_cases.campsite.get_campsites import GetCampsiteUseCase, ListCampsitesUseCase
from campsite_api.application.use_cases.campsite.replace_campsite import ReplaceCampsiteFieldsUseCase
from campsite_api.application.use_cases.comment.add_comment import AddCommentUseCase
from campsite_api.application.use_cases.comment.clear_comments import ClearCommentsUseCase
from campsite_api.application.use_cases.comment.get_comments import GetCommentsUseCase
from campsite_api.application.use_cases.comment.modify_comment import DeleteCommentUseCase, UpdateCommentUseCase
from campsite_api.application.views import CampsiteView, CommentMutationOutcome, CommentsView
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository, DeletionReport
from campsite_api.domain.repositories.user_repository import UserRepository


class CampsiteService:
    """
    Application service for campsites and their comments.

    Every operation is a single fetch -> authorize -> mutate -> save pass over
    one campsite aggregate; the service keeps no state between calls.
    """

    def __init__(self, campsite_repository: CampsiteRepository, user_repository: UserRepository):
        """
        Initialize service with repositories.

        Args:
            campsite_repository: Repository for campsite persistence
            user_repository: Read-only user lookups (comment authors)
        """
        author_resolver = AuthorResolver(user_repository)
        self._list_use_case = ListCampsitesUseCase(campsite_repository, author_resolver)
        self._get_use_case = GetCampsiteUseCase(campsite_repository, author_resolver)
        self._create_use_case = CreateCampsiteUseCase(campsite_repository)
        self._replace_use_case = ReplaceCampsiteFieldsUseCase(campsite_repository)
        self._delete_use_case = DeleteCampsiteUseCase(campsite_repository)
        self._delete_all_use_case = DeleteAllCampsitesUseCase(campsite_repository)
        self._get_comments_use_case = GetCommentsUseCase(campsite_repository, author_resolver)
        self._add_comment_use_case = AddCommentUseCase(campsite_repository)
        self._clear_comments_use_case = ClearCommentsUseCase(campsite_repository)
        self._update_comment_use_case = UpdateCommentUseCase(campsite_repository)
        self._delete_comment_use_case = DeleteCommentUseCase(campsite_repository)

    # ------------------------------------------------------------------
    # Campsites
    # ------------------------------------------------------------------

    def list_all(self) -> List[CampsiteView]:
        """List every campsite with comment authors resolved."""
        return self._list_use_case.execute()

    def get_one(self, campsite_id: str) -> CampsiteView:
        """Get one campsite with comment authors resolved (NotFoundError if absent)."""
        return self._get_use_case.execute(campsite_id)

    def create(self, payload: Dict[str, Any], principal: Optional[Principal]) -> Campsite:
        """Create a campsite (admin only)."""
        return self._create_use_case.execute(payload, principal)

    def replace_fields(self, campsite_id: str, payload: Dict[str, Any], principal: Optional[Principal]) -> Campsite:
        """Overwrite top-level fields of a campsite (admin only)."""
        return self._replace_use_case.execute(campsite_id, payload, principal)

    def delete_one(self, campsite_id: str, principal: Optional[Principal]) -> DeletionReport:
        """Delete a campsite (admin only); missing ids report zero removed."""
        return self._delete_use_case.execute(campsite_id, principal)

    def delete_all(self, principal: Optional[Principal]) -> DeletionReport:
        """Delete every campsite (admin only)."""
        return self._delete_all_use_case.execute(principal)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def list_comments(self, campsite_id: str) -> CommentsView:
        return self._get_comments_use_case.execute(campsite_id)

    def get_comment(self, campsite_id: str, comment_id: str) -> CommentsView:
        return self._get_comments_use_case.execute(campsite_id, comment_id)

    def add_comment(
        self,
        campsite_id: str,
        text: str,
        principal: Optional[Principal],
        rating: Optional[int] = None,
    ) -> Campsite:
        return self._add_comment_use_case.execute(campsite_id, text, principal, rating=rating)

    def clear_comments(self, campsite_id: str, principal: Optional[Principal]) -> Campsite:
        """Remove all comments of a campsite (admin only)."""
        return self._clear_comments_use_case.execute(campsite_id, principal)

    def update_comment(
        self,
        campsite_id: str,
        comment_id: str,
        text: Optional[str],
        principal: Optional[Principal],
    ) -> CommentMutationOutcome:
        """Edit a comment's text (author only; non-authors get a denied outcome)."""
        return self._update_comment_use_case.execute(campsite_id, comment_id, text, principal)

    def delete_comment(
        self,
        campsite_id: str,
        comment_id: str,
        principal: Optional[Principal],
    ) -> CommentMutationOutcome:
        """Remove a comment (author only; non-authors get a denied outcome)."""
        return self._delete_comment_use_case.execute(campsite_id, comment_id, principal)
