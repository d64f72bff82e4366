"""
Get Comments Use Case
=====================

Public reads of a campsite's comments with authors resolved.
"""
from typing import Optional

from campsite_api.application.services.author_resolver import AuthorResolver
from campsite_api.application.use_cases.authorize import authorize
from campsite_api.application.views import CommentsView
from campsite_api.domain.authorization import AuthorizationContext, Operation
from campsite_api.domain.exceptions import NotFoundError
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository


class GetCommentsUseCase:
    """Use case for listing comments, or fetching a single one."""

    def __init__(self, campsite_repository: CampsiteRepository, author_resolver: AuthorResolver):
        self._repository = campsite_repository
        self._authors = author_resolver

    def execute(self, campsite_id: str, comment_id: Optional[str] = None) -> CommentsView:
        """
        Args:
            campsite_id: Parent campsite
            comment_id: When given, only that comment is returned

        Raises:
            NotFoundError: If the campsite or the comment does not exist
        """
        operation = Operation.LIST_COMMENTS if comment_id is None else Operation.GET_COMMENT
        campsite = self._repository.find_by_id(campsite_id)
        authorize(
            operation,
            AuthorizationContext(campsite_id=campsite_id, campsite=campsite, comment_id=comment_id),
        )
        if campsite is None:
            raise NotFoundError(f"Campsite {campsite_id} not found")

        comments = campsite.comments
        if comment_id is not None:
            comment = campsite.find_comment(comment_id)
            if comment is None:
                raise NotFoundError(f"Comment {comment_id} not found")
            comments = [comment]

        authors = self._authors.resolve_ids(c.author_id for c in comments)
        return CommentsView(campsite_id=campsite.id, comments=comments, authors=authors)
